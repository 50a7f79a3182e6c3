class ExtractionError(Exception):
    """Raised when extraction fails.

    Carries the provider's HTTP status and error body when there was one,
    so callers can tell quota exhaustion apart from other failures.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        payload: object = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class ExtractionRateLimitError(ExtractionError):
    """Raised when the provider rejects the call for rate or quota reasons."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the provider call fails due to network/infrastructure issues."""


class ExtractionValidationError(ExtractionError):
    """Raised when the model output is not a list of flat asset objects."""
