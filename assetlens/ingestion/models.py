import uuid
from dataclasses import dataclass, field

PENDING = "pending"
PROCESSING = "processing"
COMPLETED = "completed"
ERROR = "error"

TASK_STATUSES = (PENDING, PROCESSING, COMPLETED, ERROR)


@dataclass(frozen=True)
class QueuedFile:
    """A file accepted for extraction: its name and raw content."""

    name: str
    content: bytes | str

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class QueueTask:
    """One file's extraction job and its lifecycle status."""

    file: QueuedFile
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    status: str = PENDING
    error_message: str | None = None
    retries: int = 0
    records_added: int = 0

    @property
    def is_finished(self) -> bool:
        return self.status in (COMPLETED, ERROR)


@dataclass(frozen=True)
class ProcessingResult:
    """What one successful extraction produced."""

    extracted: int
    added: int

    @property
    def duplicates(self) -> int:
        return self.extracted - self.added
