import threading

from assetlens.config.settings import Settings
from assetlens.ingestion.models import ProcessingResult, QueueTask
from assetlens.ingestion.processor import IngestionProcessor
from assetlens.ingestion.queue import IngestionQueue
from assetlens.ingestion.retry import backoff_delay_ms, is_rate_limit_error
from assetlens.logging.logger import Log
from assetlens.notifications.channel import NotificationChannel

STOPPED_MESSAGE = "Processing stopped before completion"


class TaskRunner:
    """Run one claimed task: pace, extract, retry rate limits, record the outcome.

    Pacing and backoff waits end early when stop_event is set; the task is
    then marked as errored without another attempt.
    """

    def __init__(
        self,
        processor: IngestionProcessor,
        queue: IngestionQueue,
        notifications: NotificationChannel,
        settings: Settings,
        stop_event: threading.Event | None = None,
    ) -> None:
        self._processor = processor
        self._queue = queue
        self._notifications = notifications
        self._settings = settings
        self._stop = stop_event if stop_event is not None else threading.Event()

    def run(self, task: QueueTask) -> None:
        """Execute a single task. Never raises for task-level failures."""
        provider = self._queue.provider
        retries = 0
        Log.info(f"Running task {task.id} ({task.file.name}) with provider {provider}")
        while True:
            if not self._wait_before_attempt(task, retries):
                self._handle_stopped(task)
                return
            try:
                result = self._processor.process(task.file, provider)
            except Exception as exc:
                Log.error(f"Attempt {retries + 1} failed for {task.file.name}: {exc}")
                if is_rate_limit_error(exc) and retries < self._settings.queue_max_retries:
                    retries += 1
                    self._queue.record_retry(task.id, retries)
                    continue
                self._handle_failure(task, exc, retries)
                return
            self._handle_success(task, result)
            return

    def _wait_before_attempt(self, task: QueueTask, retries: int) -> bool:
        """Sleep out the pacing or backoff delay. False if a stop was requested."""
        if retries == 0:
            delay_ms = self._settings.queue_pacing_delay_ms
        else:
            delay_ms = backoff_delay_ms(retries, self._settings.queue_backoff_base_ms)
            Log.warning(f"Rate limit hit for {task.file.name}. Retrying in {delay_ms}ms...")
        if delay_ms > 0:
            return not self._stop.wait(delay_ms / 1000)
        return not self._stop.is_set()

    def _handle_success(self, task: QueueTask, result: ProcessingResult) -> None:
        self._queue.mark_completed(task.id, result.added)
        Log.info(f"Task {task.id} completed: {result.added}/{result.extracted} new record(s)")
        if result.added or not result.extracted:
            self._notifications.success(
                f"Processed {task.file.name}: {result.added} new record(s)."
            )
        else:
            self._notifications.info(
                f"Processed {task.file.name}: all {result.extracted} record(s) already present."
            )

    def _handle_failure(self, task: QueueTask, exc: Exception, retries: int) -> None:
        message = str(exc) or "Processing Failed"
        self._queue.mark_error(task.id, message)
        Log.error(f"Task {task.id} failed after {retries + 1} attempt(s): {message}")
        self._notifications.error(f"Failed to process {task.file.name}: {message}")

    def _handle_stopped(self, task: QueueTask) -> None:
        self._queue.mark_error(task.id, STOPPED_MESSAGE)
        Log.warning(f"Task {task.id} ({task.file.name}) stopped before completion")
