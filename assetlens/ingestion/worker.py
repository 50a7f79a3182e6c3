import threading

from assetlens.config.settings import Settings
from assetlens.ingestion.job_runner import TaskRunner
from assetlens.ingestion.queue import IngestionQueue
from assetlens.logging.logger import Log


class Worker:
    """Single-flight drain loop: claim -> run, one task at a time.

    trigger() takes a non-blocking mutex, so a second trigger while a drain
    is active (from any thread, or re-entrantly from a queue listener)
    returns immediately. Queue changes set a wake event that the
    background loop waits on.
    """

    def __init__(
        self,
        queue: IngestionQueue,
        task_runner: TaskRunner,
        settings: Settings,
        stop_event: threading.Event | None = None,
    ) -> None:
        self._queue = queue
        self._task_runner = task_runner
        self._settings = settings
        self._drain_lock = threading.Lock()
        self._wake = threading.Event()
        # Shared with the TaskRunner so stop() also cuts its waits short.
        self._stop = stop_event if stop_event is not None else threading.Event()
        self._thread: threading.Thread | None = None
        queue.subscribe(self._wake.set)

    @property
    def is_active(self) -> bool:
        return self._drain_lock.locked()

    def trigger(self) -> int:
        """Drain pending tasks unless a drain is already running.

        Returns the number of tasks this call ran; 0 when another drain
        holds the lock or nothing is pending.
        """
        tasks_done = 0
        while True:
            if not self._drain_lock.acquire(blocking=False):
                return tasks_done
            try:
                tasks_done += self._drain()
            finally:
                self._drain_lock.release()
            # Work enqueued between the last claim and the release.
            if self._stop.is_set() or not self._queue.has_pending():
                return tasks_done

    def run(self, stop_when_idle: bool = False) -> int:
        """Wait-and-drain loop. Runs until stop(), KeyboardInterrupt, or idle.

        If stop_when_idle is set, return once nothing is pending or processing.
        """
        Log.info("Worker started, waiting for tasks")
        tasks_done = 0
        try:
            while not self._stop.is_set():
                self._wake.clear()
                done = self.trigger()
                tasks_done += done
                if stop_when_idle and not self._queue.is_busy:
                    break
                if not done:
                    Log.debug("No tasks pending, waiting")
                    self._wake.wait(self._settings.worker_poll_interval_seconds)
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")
        return tasks_done

    def start(self) -> None:
        """Run the loop on a daemon thread."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self.run, name="assetlens-worker", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Ask the loop to exit and wait for it. A task waiting to retry is abandoned."""
        self._stop.set()
        self._wake.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _drain(self) -> int:
        tasks_done = 0
        while not self._stop.is_set():
            task = self._queue.claim_next()
            if task is None:
                break
            self._task_runner.run(task)
            tasks_done += 1
        return tasks_done
