"""Validates parsed model output and builds AssetRecords."""

from typing import Any

from assetlens.extraction.exceptions import ExtractionValidationError
from assetlens.records.models import COLUMN_LABELS, PLACEHOLDER, AssetRecord

_MAX_ASSETS = 500


def validate_and_build(data: Any) -> list[AssetRecord]:
    """Validate raw parsed JSON and build AssetRecords.

    Accepts a list of asset objects, an object wrapping that list under
    "assets", or a single asset object.

    Raises:
        ExtractionValidationError: on any validation failure.
    """
    items = _unwrap(data)
    if len(items) > _MAX_ASSETS:
        raise ExtractionValidationError(f"Too many assets: {len(items)} (max {_MAX_ASSETS})")
    return [_build_record(item, i) for i, item in enumerate(items)]


def _unwrap(data: Any) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        if "assets" in data:
            assets = data["assets"]
            if not isinstance(assets, list):
                raise ExtractionValidationError("'assets' must be a list")
            return assets
        return [data]
    raise ExtractionValidationError("Response must be a JSON array or object")


def _build_record(raw: Any, index: int) -> AssetRecord:
    if not isinstance(raw, dict):
        raise ExtractionValidationError(f"Asset at index {index} must be an object")
    values: dict[str, str] = {}
    for label in COLUMN_LABELS:
        values[label] = _coerce_value(raw.get(label), label, index)
    return AssetRecord.from_mapping(values)


def _coerce_value(raw: Any, label: str, index: int) -> str:
    if raw is None:
        return PLACEHOLDER
    if isinstance(raw, bool):
        raise ExtractionValidationError(
            f"Asset at index {index}: '{label}' must be a string, got a boolean"
        )
    if isinstance(raw, (int, float)):
        return str(raw)
    if not isinstance(raw, str):
        raise ExtractionValidationError(
            f"Asset at index {index}: '{label}' must be a string"
        )
    return raw
