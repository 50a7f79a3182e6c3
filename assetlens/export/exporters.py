"""CSV, XLSX and JSON serializers for the full record set.

Columns always follow the canonical order and every value is written as
text, so a JSON export reparses to identical field values.
"""

import csv
import json
from collections.abc import Callable, Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from assetlens.records.models import COLUMN_LABELS, AssetRecord

_SHEET_TITLE = "Assets"
_COLUMN_WIDTH = 20


def export_csv(records: Sequence[AssetRecord], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(COLUMN_LABELS))
        writer.writeheader()
        for record in records:
            writer.writerow(record.to_mapping())
    return path


def export_xlsx(records: Sequence[AssetRecord], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = _SHEET_TITLE
    sheet.append(list(COLUMN_LABELS))
    for record in records:
        sheet.append(list(record.to_mapping().values()))
        for cell in sheet[sheet.max_row]:
            # Values starting with "=" stay literal text, not formulas.
            cell.data_type = "s"
    for column in range(1, len(COLUMN_LABELS) + 1):
        sheet.column_dimensions[get_column_letter(column)].width = _COLUMN_WIDTH
    workbook.save(path)
    return path


def export_json(records: Sequence[AssetRecord], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [record.to_mapping() for record in records]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def load_json(path: Path) -> list[AssetRecord]:
    """Read a JSON export back into records."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path} does not hold a JSON array of assets")
    return [AssetRecord.from_mapping(item) for item in data if isinstance(item, dict)]


EXPORTERS: dict[str, Callable[[Sequence[AssetRecord], Path], Path]] = {
    "csv": export_csv,
    "xlsx": export_xlsx,
    "json": export_json,
}


def export_records(
    records: Sequence[AssetRecord], directory: Path, basename: str, fmt: str
) -> Path:
    """Write records as directory/basename.<fmt>."""
    exporter = EXPORTERS.get(fmt.lower())
    if exporter is None:
        raise ValueError(f"Unknown export format '{fmt}'. Choose from: {list(EXPORTERS)}")
    return exporter(records, directory / f"{basename}.{fmt.lower()}")
