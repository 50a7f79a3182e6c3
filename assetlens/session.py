import threading
from collections.abc import Iterable
from pathlib import Path

from assetlens.config.settings import Settings
from assetlens.database.connection import close_pool, init_pool
from assetlens.database.models import HistoryEntry
from assetlens.database.repositories.asset_repository import AssetRepository
from assetlens.database.repositories.history_repository import HistoryRepository
from assetlens.export.exporters import export_records
from assetlens.extraction.factory import ExtractorFactory, ExtractorRegistry
from assetlens.ingestion.file_loader import load_file
from assetlens.ingestion.job_runner import TaskRunner
from assetlens.ingestion.models import QueuedFile, QueueTask
from assetlens.ingestion.processor import IngestionProcessor
from assetlens.ingestion.queue import IngestionQueue
from assetlens.ingestion.worker import Worker
from assetlens.logging.logger import Log
from assetlens.notifications.channel import NotificationChannel
from assetlens.persistence import BackgroundPersister
from assetlens.records.store import RecordStore
from assetlens.view.engine import RecordView
from assetlens.view.summary import AssetSummary, summarize


class AssetSession:
    """One user's working set: record store, ingestion queue, worker and table view."""

    def __init__(
        self,
        settings: Settings,
        store: RecordStore,
        notifications: NotificationChannel,
        queue: IngestionQueue,
        worker: Worker,
        view: RecordView,
        history_repo: HistoryRepository | None = None,
        asset_repo: AssetRepository | None = None,
        persister: BackgroundPersister | None = None,
    ) -> None:
        self.settings = settings
        self.store = store
        self.notifications = notifications
        self.queue = queue
        self.worker = worker
        self.view = view
        self._history_repo = history_repo
        self._asset_repo = asset_repo
        self._persister = persister

    def add_files(self, files: Iterable[QueuedFile]) -> list[QueueTask]:
        return self.queue.enqueue(files)

    def add_paths(self, paths: Iterable[Path]) -> list[QueueTask]:
        return self.add_files(load_file(path) for path in paths)

    def process_pending(self) -> int:
        """Drain the queue on the calling thread; no-op if a drain is already running."""
        return self.worker.trigger()

    def set_provider(self, provider: str) -> None:
        if provider.lower() not in ExtractorFactory.supported_providers():
            raise ValueError(
                f"Unknown extraction provider '{provider}'. "
                f"Choose from: {ExtractorFactory.supported_providers()}"
            )
        self.queue.set_provider(provider)

    def clear_queue(self) -> int:
        return self.queue.clear()

    def export(self, fmt: str, directory: Path | None = None, basename: str | None = None) -> Path:
        """Export the whole store, not just the visible page."""
        return export_records(
            self.store.records(),
            directory or Path(self.settings.export_dir),
            basename or self.settings.export_basename,
            fmt,
        )

    def export_all(self) -> list[Path]:
        return [self.export(fmt) for fmt in self.settings.export_formats]

    def summary(self) -> AssetSummary:
        return summarize(self.store.records())

    def history(self) -> list[HistoryEntry]:
        if self._history_repo is None or not self.settings.user_id:
            return []
        return self._history_repo.list_for_user(self.settings.user_id)

    def delete_history(self, history_id: str) -> bool:
        if self._history_repo is None:
            return False
        return self._history_repo.delete(history_id)

    def load_saved_assets(self) -> int:
        """Pull stored assets into the session, skipping asset tags already loaded."""
        if self._asset_repo is None:
            return 0
        added = self.store.merge_unique(self._asset_repo.list_all())
        Log.info(f"Loaded {len(added)} saved asset(s)")
        return len(added)

    def close(self) -> None:
        self.worker.stop(timeout=5)
        if self._persister is not None:
            self._persister.shutdown(wait=True)
        if self._history_repo is not None or self._asset_repo is not None:
            close_pool()


def build_session(settings: Settings, start_worker: bool = False) -> AssetSession:
    """Wire a session from settings. The database is only touched when persistence is enabled."""
    notifications = NotificationChannel()
    store = RecordStore()

    history_repo: HistoryRepository | None = None
    asset_repo: AssetRepository | None = None
    persister: BackgroundPersister | None = None
    if settings.persistence_enabled:
        init_pool(settings)
        history_repo = HistoryRepository()
        asset_repo = AssetRepository()
        persister = BackgroundPersister(history_repo, asset_repo, settings.user_id)

    queue = IngestionQueue(settings, notifications)
    processor = IngestionProcessor(ExtractorRegistry(settings), store, settings, persister)
    stop_event = threading.Event()
    task_runner = TaskRunner(processor, queue, notifications, settings, stop_event)
    worker = Worker(queue, task_runner, settings, stop_event)
    view = RecordView(store, settings.default_page_size)

    session = AssetSession(
        settings=settings,
        store=store,
        notifications=notifications,
        queue=queue,
        worker=worker,
        view=view,
        history_repo=history_repo,
        asset_repo=asset_repo,
        persister=persister,
    )
    if start_worker:
        worker.start()
    return session
