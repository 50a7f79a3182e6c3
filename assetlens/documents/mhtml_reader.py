import email
from email import policy

from assetlens.documents.base import BaseDocumentReader
from assetlens.documents.exceptions import DocumentReadError
from assetlens.documents.html_reader import decode_text


class MhtmlReader(BaseDocumentReader):
    """Pulls the first text/html part out of an MHTML web archive."""

    def read(self, content: bytes) -> str:
        try:
            message = email.message_from_bytes(content, policy=policy.default)
        except Exception as exc:
            raise DocumentReadError(f"MHTML parsing failed: {exc}") from exc

        for part in message.walk():
            if part.get_content_type() != "text/html":
                continue
            payload = part.get_payload(decode=True)
            if payload is None:
                continue
            charset = part.get_content_charset() or "utf-8"
            try:
                return payload.decode(charset, errors="replace")
            except LookupError:
                return decode_text(payload)
        # Not a multipart archive, e.g. a plain HTML page saved as .mhtml.
        return decode_text(content)
