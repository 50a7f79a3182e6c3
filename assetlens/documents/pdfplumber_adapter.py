import io

import pdfplumber

from assetlens.documents.base import BaseDocumentReader
from assetlens.documents.exceptions import DocumentReadError


class PdfPlumberAdapter(BaseDocumentReader):
    """Extracts text from PDF reports using pdfplumber."""

    def read(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise DocumentReadError(f"pdfplumber extraction failed: {exc}") from exc
