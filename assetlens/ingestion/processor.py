from typing import Protocol

from assetlens.config.settings import Settings
from assetlens.documents.factory import DocumentReaderFactory
from assetlens.extraction.base import BaseExtractor
from assetlens.ingestion.models import ProcessingResult, QueuedFile
from assetlens.logging.logger import Log
from assetlens.persistence import BackgroundPersister
from assetlens.records.store import RecordStore


class ExtractorSource(Protocol):
    def get(self, provider: str) -> BaseExtractor: ...


class IngestionProcessor:
    """Runs one file through read -> extract -> merge -> background save.

    Pipeline: read document text, call the provider's extractor, merge the
    new asset tags into the store, then hand the full result to the
    persister without waiting for it.
    """

    def __init__(
        self,
        extractors: ExtractorSource,
        store: RecordStore,
        settings: Settings,
        persister: BackgroundPersister | None = None,
    ) -> None:
        self._extractors = extractors
        self._store = store
        self._settings = settings
        self._persister = persister

    def process(self, file: QueuedFile, provider: str) -> ProcessingResult:
        text = self._read_text(file)
        Log.info(f"Read {len(text)} chars from {file.name}")

        extractor = self._extractors.get(provider)
        records = extractor.extract(text, file.name)

        added = self._store.merge_unique(records)
        skipped = len(records) - len(added)
        Log.info(
            f"Merged {len(added)} new record(s) from {file.name}"
            + (f", skipped {skipped} known asset tag(s)" if skipped else "")
        )

        if self._persister is not None:
            # Records are already merged; a failed handoff must not fail the task.
            try:
                self._persister.submit(file.name, records)
            except Exception as exc:
                Log.error(f"Could not schedule background save for {file.name}: {exc}")

        return ProcessingResult(extracted=len(records), added=len(added))

    def _read_text(self, file: QueuedFile) -> str:
        if isinstance(file.content, str):
            return file.content
        reader = DocumentReaderFactory.for_filename(file.name, self._settings)
        return reader.read(file.content)
