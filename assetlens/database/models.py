from dataclasses import dataclass, field
from datetime import datetime

from assetlens.records.models import AssetRecord


@dataclass
class HistoryEntry:
    """Represents a row from the extraction_history table."""

    id: str
    user_id: str
    filename: str
    records: list[AssetRecord] = field(default_factory=list)
    created_at: datetime | None = None
