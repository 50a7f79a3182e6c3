import threading
from collections.abc import Callable, Iterable
from dataclasses import replace
from pathlib import PurePath

from assetlens.config.settings import Settings
from assetlens.ingestion.exceptions import InvalidTaskTransitionError, QueueTaskNotFoundError
from assetlens.ingestion.models import (
    COMPLETED,
    ERROR,
    PENDING,
    PROCESSING,
    TASK_STATUSES,
    QueuedFile,
    QueueTask,
)
from assetlens.logging.logger import Log
from assetlens.notifications.channel import NotificationChannel

QueueListener = Callable[[], None]


class IngestionQueue:
    """FIFO of extraction tasks plus the active provider selection.

    Every mutation notifies subscribers after the lock is released; the
    worker subscribes to wake its drain loop. Callers get copies of tasks,
    never the queue's own objects.
    """

    def __init__(
        self,
        settings: Settings,
        notifications: NotificationChannel,
        provider: str | None = None,
    ) -> None:
        self._notifications = notifications
        self._max_files = settings.queue_max_files
        self._allowed_extensions = tuple(settings.allowed_extensions)
        self._provider = (provider or settings.extraction_provider).lower()
        self._lock = threading.RLock()
        self._tasks: list[QueueTask] = []
        self._listeners: list[QueueListener] = []

    def subscribe(self, listener: QueueListener) -> None:
        self._listeners.append(listener)

    @property
    def provider(self) -> str:
        with self._lock:
            return self._provider

    def set_provider(self, provider: str) -> None:
        with self._lock:
            self._provider = provider.lower()
        Log.info(f"Extraction provider set to {provider}")
        self._notify()

    def enqueue(self, files: Iterable[QueuedFile]) -> list[QueueTask]:
        """Validate a batch of files and append the accepted ones as pending tasks.

        Rejections (capacity, extension, duplicate name) never raise; they
        are reported through the notification channel. A success message is
        only sent when nothing in the batch was rejected.
        """
        candidates = list(files)
        if not candidates:
            return []

        with self._lock:
            active = sum(1 for t in self._tasks if not t.is_finished)
            if active + len(candidates) > self._max_files:
                Log.warning(
                    f"Rejected batch of {len(candidates)} files: queue limit {self._max_files}"
                )
                self._notifications.error(f"Maximum {self._max_files} files allowed.")
                return []

            allowed = [f for f in candidates if self._has_allowed_extension(f.name)]
            bad_extension = len(candidates) - len(allowed)

            known_names = {t.file.name for t in self._tasks}
            accepted: list[QueuedFile] = []
            duplicates = 0
            for candidate in allowed:
                if candidate.name in known_names:
                    duplicates += 1
                    continue
                known_names.add(candidate.name)
                accepted.append(candidate)

            new_tasks = [QueueTask(file=f) for f in accepted]
            self._tasks.extend(new_tasks)
            created = [replace(t) for t in new_tasks]

        if bad_extension:
            Log.warning(f"Skipped {bad_extension} file(s) with a disallowed extension")
            self._notifications.error(
                f"Some files were skipped. Only {', '.join(self._allowed_extensions)} allowed."
            )
        if duplicates:
            Log.warning(f"Skipped {duplicates} duplicate file(s)")
            self._notifications.error(
                f"Skipped {duplicates} duplicate file(s). File names must be unique."
            )
        elif created and not bad_extension:
            self._notifications.success(f"Added {len(created)} file(s) to queue.")

        if created:
            Log.info(f"Queued {len(created)} file(s): {[t.file.name for t in created]}")
            self._notify()
        return created

    def clear(self) -> int:
        """Drop every task that is not processing. Returns the number removed."""
        with self._lock:
            kept = [t for t in self._tasks if t.status == PROCESSING]
            removed = len(self._tasks) - len(kept)
            self._tasks = kept
        if removed:
            Log.info(f"Cleared {removed} task(s) from queue")
            self._notify()
        return removed

    def tasks(self) -> list[QueueTask]:
        with self._lock:
            return [replace(t) for t in self._tasks]

    def get(self, task_id: str) -> QueueTask:
        with self._lock:
            return replace(self._find(task_id))

    def claim_next(self) -> QueueTask | None:
        """Move the oldest pending task to processing and return a copy of it."""
        with self._lock:
            task = next((t for t in self._tasks if t.status == PENDING), None)
            if task is None:
                return None
            task.status = PROCESSING
            claimed = replace(task)
        Log.info(f"Task {claimed.id} ({claimed.file.name}) is processing")
        self._notify()
        return claimed

    def record_retry(self, task_id: str, retries: int) -> None:
        with self._lock:
            self._find(task_id).retries = retries

    def mark_completed(self, task_id: str, records_added: int = 0) -> None:
        with self._lock:
            task = self._transition(task_id, COMPLETED)
            task.records_added = records_added
            task.error_message = None
        self._notify()

    def mark_error(self, task_id: str, message: str) -> None:
        with self._lock:
            task = self._transition(task_id, ERROR)
            task.error_message = message
        self._notify()

    def has_pending(self) -> bool:
        with self._lock:
            return any(t.status == PENDING for t in self._tasks)

    @property
    def is_busy(self) -> bool:
        """True while anything is waiting or running."""
        with self._lock:
            return any(t.status in (PENDING, PROCESSING) for t in self._tasks)

    def counts(self) -> dict[str, int]:
        with self._lock:
            counts = dict.fromkeys(TASK_STATUSES, 0)
            for task in self._tasks:
                counts[task.status] += 1
            return counts

    def _has_allowed_extension(self, name: str) -> bool:
        return PurePath(name).suffix.lower() in self._allowed_extensions

    def _find(self, task_id: str) -> QueueTask:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise QueueTaskNotFoundError(f"Task {task_id} not found")

    def _transition(self, task_id: str, status: str) -> QueueTask:
        task = self._find(task_id)
        if task.status != PROCESSING:
            raise InvalidTaskTransitionError(
                f"Task {task_id} cannot move from {task.status} to {status}"
            )
        task.status = status
        return task

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
