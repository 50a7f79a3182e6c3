from assetlens.view.engine import EditState, RecordView
from assetlens.view.filters import OPERATORS, FilterRule
from assetlens.view.pagination import PAGE_SIZE_OPTIONS
from assetlens.view.sorting import SortConfig
from assetlens.view.summary import AssetSummary, summarize

__all__ = [
    "OPERATORS",
    "PAGE_SIZE_OPTIONS",
    "AssetSummary",
    "EditState",
    "FilterRule",
    "RecordView",
    "SortConfig",
    "summarize",
]
