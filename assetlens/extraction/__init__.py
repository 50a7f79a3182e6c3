from assetlens.extraction.base import BaseExtractor
from assetlens.extraction.exceptions import ExtractionError, ExtractionRateLimitError
from assetlens.extraction.extractor import Extractor
from assetlens.extraction.factory import ExtractorFactory, ExtractorRegistry

__all__ = [
    "BaseExtractor",
    "ExtractionError",
    "ExtractionRateLimitError",
    "Extractor",
    "ExtractorFactory",
    "ExtractorRegistry",
]
