from enum import Enum


class ErrorKind(str, Enum):
    """Single error surface reported by the upload pipeline."""

    MISSING_FILE = "missing_file"
    UNSUPPORTED_TYPE = "unsupported_type"
    TOO_LARGE = "too_large"
    STORAGE_WRITE_FAILED = "storage_write_failed"
    TRANSPORT_ERROR = "transport_error"
    REMOTE_STATUS_ERROR = "remote_status_error"
    MALFORMED_RESPONSE = "malformed_response"
    EMPTY_RESULT = "empty_result"
    MALFORMED_ENCODING = "malformed_encoding"
    UNEXPECTED_ERROR = "unexpected_error"


class BgEraserError(Exception):
    """Base exception for all pipeline errors. Subclasses pin their kind."""

    kind: ErrorKind = ErrorKind.UNEXPECTED_ERROR


def truncate(text: str, limit: int) -> str:
    """Cap text at limit characters, marking the cut with an ellipsis."""
    if limit <= 0 or len(text) <= limit:
        return text
    return text[: max(0, limit - 3)] + "..."
