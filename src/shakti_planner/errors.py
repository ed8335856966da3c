"""Error taxonomy for structured extraction calls."""


class ExtractionError(Exception):
    """Base error for goal planning and meal parsing failures."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(ExtractionError):
    """Raised when the completion endpoint credential is missing."""


class RateLimitedError(ExtractionError):
    """Raised when the completion endpoint answers HTTP 429."""

    status_code = 429

    def __init__(
        self, message: str = "Rate limit exceeded. Please try again later."
    ) -> None:
        super().__init__(message)


class QuotaExceededError(ExtractionError):
    """Raised when the completion endpoint answers HTTP 402."""

    status_code = 402

    def __init__(
        self,
        message: str = "Payment required. Please add credits to your workspace.",
    ) -> None:
        super().__init__(message)


class TransportError(ExtractionError):
    """Raised when the completion endpoint could not be reached."""


class UpstreamError(ExtractionError):
    """Raised for any other non-2xx answer from the completion endpoint."""

    def __init__(self, upstream_status: int, body: str) -> None:
        self.upstream_status = upstream_status
        self.body = body
        super().__init__(f"AI gateway error (status {upstream_status})")


class NoStructuredPayloadError(ExtractionError):
    """Raised when a completion carries no forced tool call."""

    def __init__(self, message: str = "No tool call in response") -> None:
        super().__init__(message)


class MalformedPayloadError(ExtractionError):
    """Raised when tool call arguments do not match the required shape."""

    def __init__(self, message: str, raw_arguments: str | None = None) -> None:
        self.raw_arguments = raw_arguments
        super().__init__(message)


class StoredDataError(ExtractionError):
    """Raised when a persisted row holds a value of the wrong type."""

    def __init__(self, table: str, row_id: object, column: str, value: object) -> None:
        self.table = table
        self.row_id = row_id
        self.column = column
        super().__init__(
            f"{table} row {row_id} has a non-numeric {column} value: {value!r}"
        )
