from abc import ABC, abstractmethod


class BaseDocumentReader(ABC):
    """Contract for all document-to-text adapters."""

    @abstractmethod
    def read(self, content: bytes) -> str:
        """Turn raw file content into the text handed to the extractor.

        Args:
            content: Raw file bytes.

        Returns:
            Document text.

        Raises:
            DocumentReadError: if the content cannot be decoded.
        """
