"""Rate-limit classification and backoff timing for extraction calls."""

import json

from assetlens.extraction.exceptions import ExtractionError, ExtractionRateLimitError

_RATE_LIMIT_MARKERS = ("429", "resource_exhausted", "quota")


def is_rate_limit_error(exc: BaseException) -> bool:
    """True when the failure looks like HTTP 429 or quota exhaustion.

    Looks at the status code and at the text of the message and provider
    payload, since providers report quota errors in different shapes.
    """
    if isinstance(exc, ExtractionRateLimitError):
        return True
    if isinstance(exc, ExtractionError) and exc.status_code == 429:
        return True
    text = _error_text(exc).lower()
    return any(marker in text for marker in _RATE_LIMIT_MARKERS)


def backoff_delay_ms(retry_count: int, base_ms: int) -> int:
    """2^retry_count * base: 5000, 10000, 20000 ms for retries 1-3 at the 2500 ms base."""
    return (2**retry_count) * base_ms


def _error_text(exc: BaseException) -> str:
    parts = [str(exc)]
    payload = getattr(exc, "payload", None)
    if payload is not None:
        try:
            parts.append(json.dumps(payload, default=str))
        except (TypeError, ValueError):
            parts.append(repr(payload))
    return " ".join(parts)
