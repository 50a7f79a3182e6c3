from abc import ABC, abstractmethod

from assetlens.records.models import AssetRecord


class BaseExtractor(ABC):
    """Contract for all extraction adapters."""

    @abstractmethod
    def extract(self, document_text: str, filename: str) -> list[AssetRecord]:
        """Turn one asset report into normalized asset records.

        Args:
            document_text: Text of the uploaded report (usually HTML).
            filename: Original file name; the asset tag is derived from it.

        Returns:
            Zero or more AssetRecords.

        Raises:
            ExtractionError: on any failure.
        """
