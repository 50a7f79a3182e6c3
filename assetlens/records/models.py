from dataclasses import dataclass, fields, replace
from typing import Any

PLACEHOLDER = "nill"

# (attribute name, column label) in canonical display/export order.
COLUMNS: tuple[tuple[str, str], ...] = (
    ("asset_tag", "Asset Tag"),
    ("block", "Block"),
    ("floor", "Floor"),
    ("dept", "Dept"),
    ("brand", "Brand"),
    ("service_tag", "Service Tag"),
    ("computer_name", "Computer Name"),
    ("processor_type", "Processor Type"),
    ("processor_generation", "Processor Generation"),
    ("processor_speed_ghz", "Processor Speed (GHz)"),
    ("ram_gb", "RAM (GB)"),
    ("hard_drive_type", "Hard Drive Type"),
    ("hard_drive_size", "Hard Drive Size"),
    ("graphics_card", "Graphics Card"),
    ("os_name", "Operating System OS"),
    ("os_architecture", "Operating System Architecture"),
    ("os_version", "Operating System Version"),
    ("windows_license_key", "Windows License Key"),
    ("ms_office_version", "MS Office Version"),
    ("ms_office_license_key", "MS Office License Key"),
    ("installed_applications", "Installed Applications"),
    ("antivirus", "Antivirus"),
    ("ip_address", "IP Address"),
    ("remarks", "Remarks"),
)

COLUMN_LABELS: tuple[str, ...] = tuple(label for _, label in COLUMNS)
ASSET_TAG = "Asset Tag"

_ATTR_BY_LABEL: dict[str, str] = {label: attr for attr, label in COLUMNS}


def attribute_for(column: str) -> str:
    """Map a column label to its AssetRecord attribute.

    Raises:
        ValueError: if the label is not one of COLUMN_LABELS.
    """
    try:
        return _ATTR_BY_LABEL[column]
    except KeyError:
        raise ValueError(f"Unknown column '{column}'. Choose from: {list(COLUMN_LABELS)}") from None


@dataclass(frozen=True)
class AssetRecord:
    """One normalized IT asset. Every field is a string; missing data is PLACEHOLDER."""

    asset_tag: str = PLACEHOLDER
    block: str = PLACEHOLDER
    floor: str = PLACEHOLDER
    dept: str = PLACEHOLDER
    brand: str = PLACEHOLDER
    service_tag: str = PLACEHOLDER
    computer_name: str = PLACEHOLDER
    processor_type: str = PLACEHOLDER
    processor_generation: str = PLACEHOLDER
    processor_speed_ghz: str = PLACEHOLDER
    ram_gb: str = PLACEHOLDER
    hard_drive_type: str = PLACEHOLDER
    hard_drive_size: str = PLACEHOLDER
    graphics_card: str = PLACEHOLDER
    os_name: str = PLACEHOLDER
    os_architecture: str = PLACEHOLDER
    os_version: str = PLACEHOLDER
    windows_license_key: str = PLACEHOLDER
    ms_office_version: str = PLACEHOLDER
    ms_office_license_key: str = PLACEHOLDER
    installed_applications: str = PLACEHOLDER
    antivirus: str = PLACEHOLDER
    ip_address: str = PLACEHOLDER
    remarks: str = PLACEHOLDER

    def get(self, column: str) -> str:
        return str(getattr(self, attribute_for(column)))

    def with_value(self, column: str, value: str) -> "AssetRecord":
        return replace(self, **{attribute_for(column): value})

    def values(self) -> list[str]:
        return [getattr(self, f.name) for f in fields(self)]

    def to_mapping(self) -> dict[str, str]:
        """Label-keyed dict in canonical column order."""
        return {label: getattr(self, attr) for attr, label in COLUMNS}

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "AssetRecord":
        """Build a record from a label-keyed mapping.

        Unknown keys are ignored, absent keys become PLACEHOLDER, and
        None values become PLACEHOLDER. Other values are kept as their
        string form so numbers never lose their textual representation.
        """
        kwargs: dict[str, str] = {}
        for attr, label in COLUMNS:
            if label not in data:
                continue
            value = data[label]
            kwargs[attr] = PLACEHOLDER if value is None else str(value)
        return cls(**kwargs)


@dataclass(frozen=True)
class StoredRecord:
    """An AssetRecord paired with the synthetic id assigned when it entered the store."""

    uid: int
    record: AssetRecord
