"""AI-powered asset report extractor."""

import json
import re
from dataclasses import replace
from pathlib import Path, PurePath

from assetlens.extraction.base import BaseExtractor
from assetlens.extraction.client_base import BaseExtractionClient
from assetlens.extraction.exceptions import ExtractionError
from assetlens.extraction.prompt_loader import load_prompt_template, load_system_prompt
from assetlens.extraction.validator import validate_and_build
from assetlens.logging.logger import Log
from assetlens.records.models import COLUMN_LABELS, PLACEHOLDER, AssetRecord

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LAST_EXTENSION = re.compile(r"\.[^/.]+$")


def asset_tag_from_filename(filename: str) -> str:
    """File name without its last extension: 'PC-0042.html' -> 'PC-0042'.

    A dot-only name such as '.report' is all extension and yields ''.
    """
    return _LAST_EXTENSION.sub("", PurePath(filename).name)


def clean_ram(value: str) -> str:
    """Keep only digits and dots; nothing numeric left means the placeholder."""
    return _NON_NUMERIC.sub("", value or "") or PLACEHOLDER


class Extractor(BaseExtractor):
    """Extracts asset records from report text using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.1,
        prompt_template_path: Path | None = None,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._system_prompt = load_system_prompt(system_prompt_path)

    def extract(self, document_text: str, filename: str) -> list[AssetRecord]:
        prompt = self._build_prompt(document_text, filename)
        Log.debug(f"Extraction prompt for {filename}:\n{prompt}")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response for {filename}:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        records = [self._post_process(r, filename) for r in validate_and_build(parsed)]

        Log.info(f"Extraction complete for {filename}: {len(records)} assets")
        return records

    def _build_prompt(self, document_text: str, filename: str) -> str:
        return self._prompt_template.format(
            placeholder=PLACEHOLDER,
            field_list=", ".join(COLUMN_LABELS),
            filename=filename,
            document_text=document_text,
        )

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )

    @staticmethod
    def _post_process(record: AssetRecord, filename: str) -> AssetRecord:
        return replace(
            record,
            asset_tag=asset_tag_from_filename(filename),
            ram_gb=clean_ram(record.ram_gb),
        )

    @staticmethod
    def _parse_json(raw: str) -> object:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        if not cleaned:
            return []
        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ExtractionError(f"Invalid JSON response: {exc}") from exc
