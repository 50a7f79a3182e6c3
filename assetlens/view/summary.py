"""Dashboard aggregates over a record set."""

from collections import Counter
from dataclasses import dataclass, field

from assetlens.records.models import PLACEHOLDER, AssetRecord

_MAX_LABEL = 15
COMPLIANCE_LEVELS = ("Critical", "Bad", "Good")


@dataclass
class AssetSummary:
    total_assets: int = 0
    os_distribution: dict[str, int] = field(default_factory=dict)
    office_distribution: dict[str, int] = field(default_factory=dict)
    antivirus_distribution: dict[str, int] = field(default_factory=dict)
    compliance: dict[str, int] = field(default_factory=dict)


def summarize(records: list[AssetRecord]) -> AssetSummary:
    os_counts: Counter[str] = Counter()
    office_counts: Counter[str] = Counter()
    antivirus_counts: Counter[str] = Counter()
    compliance: Counter[str] = Counter()

    for record in records:
        os_counts[_os_label(record.os_name)] += 1
        office_counts[_office_label(record.ms_office_version)] += 1
        antivirus_counts[_antivirus_label(record.antivirus)] += 1
        level = compliance_level(record.remarks)
        if level is not None:
            compliance[level] += 1

    return AssetSummary(
        total_assets=len(records),
        os_distribution=dict(os_counts),
        office_distribution=dict(office_counts),
        antivirus_distribution=dict(antivirus_counts),
        compliance={level: compliance[level] for level in COMPLIANCE_LEVELS if compliance[level]},
    )


def compliance_level(remarks: str) -> str | None:
    """Worst verdict mentioned in the remarks; Critical beats Bad beats Good."""
    for level in COMPLIANCE_LEVELS:
        if level in remarks:
            return level
    return None


def _truncate(label: str) -> str:
    return label if len(label) <= _MAX_LABEL else label[:_MAX_LABEL] + ".."


def _os_label(value: str) -> str:
    # "Microsoft Windows 10 Pro" -> "Win 10 Pro"
    label = (value or "Unknown").replace("Microsoft ", "", 1).replace("Windows ", "Win ", 1)
    return _truncate(label)


def _office_label(value: str) -> str:
    if not value or value == PLACEHOLDER:
        return "No Office"
    return value


def _antivirus_label(value: str) -> str:
    if not value.strip() or value.lower() == PLACEHOLDER:
        return "None"
    return _truncate(value.strip())
