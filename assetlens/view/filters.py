import itertools
from dataclasses import dataclass, field

from assetlens.records.models import ASSET_TAG, AssetRecord, attribute_for

OPERATORS = ("contains", "equals", "startsWith", "endsWith", "isEmpty", "isNotEmpty")

_rule_ids = itertools.count(1)


@dataclass(frozen=True)
class FilterRule:
    """One advanced-filter row. The id only identifies the row for edits and removal."""

    column: str = ASSET_TAG
    operator: str = "contains"
    value: str = ""
    id: str = field(default_factory=lambda: f"rule-{next(_rule_ids)}")

    def __post_init__(self) -> None:
        attribute_for(self.column)
        if self.operator not in OPERATORS:
            raise ValueError(f"Unknown filter operator '{self.operator}'. Choose from: {list(OPERATORS)}")


def rule_matches(record: AssetRecord, rule: FilterRule) -> bool:
    raw = record.get(rule.column)
    if rule.operator == "isEmpty":
        return not raw
    if rule.operator == "isNotEmpty":
        return bool(raw)

    cell = raw.lower()
    wanted = rule.value.lower()
    if rule.operator == "contains":
        return wanted in cell
    if rule.operator == "equals":
        return cell == wanted
    if rule.operator == "startsWith":
        return cell.startswith(wanted)
    return cell.endswith(wanted)


def matches_all(record: AssetRecord, rules: list[FilterRule]) -> bool:
    """AND of every rule; an empty rule list passes everything."""
    return all(rule_matches(record, rule) for rule in rules)


def matches_search(record: AssetRecord, term: str) -> bool:
    """True when any field contains term, ignoring case. Empty term matches."""
    if not term:
        return True
    needle = term.lower()
    return any(needle in value.lower() for value in record.values())
