from assetlens.documents.base import BaseDocumentReader


def decode_text(content: bytes) -> str:
    """Decode report bytes, honouring a UTF-8 BOM and replacing invalid sequences."""
    return content.decode("utf-8-sig", errors="replace")


class HtmlReader(BaseDocumentReader):
    """Passes HTML reports through as text; the extractor copes with messy markup."""

    def read(self, content: bytes) -> str:
        return decode_text(content)
