class IngestionError(Exception):
    """Base exception for all ingestion-related errors."""


class QueueTaskNotFoundError(IngestionError):
    """Raised when a task id is not in the queue."""


class InvalidTaskTransitionError(IngestionError):
    """Raised when a task status change would move it backwards."""
