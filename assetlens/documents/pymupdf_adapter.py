import pymupdf

from assetlens.documents.base import BaseDocumentReader
from assetlens.documents.exceptions import DocumentReadError


class PyMuPdfAdapter(BaseDocumentReader):
    """Extracts text from PDF reports using PyMuPDF."""

    def read(self, content: bytes) -> str:
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise DocumentReadError(f"pymupdf extraction failed: {exc}") from exc
