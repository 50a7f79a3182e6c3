from pathlib import PurePath

from assetlens.config.settings import Settings
from assetlens.documents.base import BaseDocumentReader
from assetlens.documents.exceptions import DocumentReadError
from assetlens.documents.html_reader import HtmlReader
from assetlens.documents.mhtml_reader import MhtmlReader
from assetlens.documents.pdfplumber_adapter import PdfPlumberAdapter
from assetlens.documents.pymupdf_adapter import PyMuPdfAdapter


class DocumentReaderFactory:
    """Picks a document reader from the file extension and settings."""

    PDF_ENGINES: dict[str, type[BaseDocumentReader]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def for_filename(cls, filename: str, settings: Settings) -> BaseDocumentReader:
        extension = PurePath(filename).suffix.lower()
        if extension in (".html", ".htm"):
            return HtmlReader()
        if extension == ".mhtml":
            return MhtmlReader()
        if extension == ".pdf":
            return cls.pdf_reader(settings)
        raise DocumentReadError(f"No reader for '{filename}' (extension '{extension}')")

    @classmethod
    def pdf_reader(cls, settings: Settings) -> BaseDocumentReader:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return adapter_cls()
