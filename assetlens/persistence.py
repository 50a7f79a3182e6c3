from concurrent.futures import Future, ThreadPoolExecutor

from assetlens.database.repositories.asset_repository import AssetRepository
from assetlens.database.repositories.history_repository import HistoryRepository
from assetlens.logging.logger import Log
from assetlens.records.models import AssetRecord


class BackgroundPersister:
    """Best-effort durable save of extraction results.

    Saves run on a single background thread so the ingestion loop never
    waits for the database. Failures are logged and dropped: the in-memory
    store stays the source of truth for the session.
    """

    def __init__(
        self,
        history_repo: HistoryRepository,
        asset_repo: AssetRepository,
        user_id: str,
    ) -> None:
        self._history_repo = history_repo
        self._asset_repo = asset_repo
        self._user_id = user_id
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="assetlens-persist")

    def submit(self, filename: str, records: list[AssetRecord]) -> Future[None] | None:
        if not self._user_id:
            Log.debug(f"No user configured, skipping durable save for {filename}")
            return None
        future = self._executor.submit(self._save, filename, list(records))
        future.add_done_callback(lambda f: self._log_failure(f, filename))
        return future

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def _save(self, filename: str, records: list[AssetRecord]) -> None:
        self._history_repo.insert(self._user_id, filename, records)
        written = self._asset_repo.upsert_many(self._user_id, records)
        Log.info(f"Saved {filename} to history and upserted {written} assets")

    @staticmethod
    def _log_failure(future: Future[None], filename: str) -> None:
        exc = future.exception()
        if exc is not None:
            Log.error(f"Background save failed for {filename}: {exc}")
