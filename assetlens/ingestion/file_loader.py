from pathlib import Path

from assetlens.ingestion.exceptions import IngestionError
from assetlens.ingestion.models import QueuedFile


class FileReadError(IngestionError):
    """Raised when a file cannot be read from disk."""


def load_file(path: Path) -> QueuedFile:
    """Read a report from disk into a QueuedFile named after the file.

    Raises:
        FileReadError: if the path is missing, not a file, or unreadable.
    """
    if not path.is_file():
        raise FileReadError(f"File not found: {path}")
    try:
        return QueuedFile(name=path.name, content=path.read_bytes())
    except OSError as exc:
        raise FileReadError(f"Failed to read {path}: {exc}") from exc


def list_inbox(directory: Path) -> list[Path]:
    """Files directly inside directory, sorted by name. Missing directory -> empty."""
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.iterdir() if p.is_file())
