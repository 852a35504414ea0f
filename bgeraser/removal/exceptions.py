from bgeraser.errors import BgEraserError, ErrorKind


class RemovalError(BgEraserError):
    """Base exception for background removal failures."""


class TransportError(RemovalError):
    """Raised when a request to the removal backend could not be completed."""

    kind = ErrorKind.TRANSPORT_ERROR


class RemoteStatusError(RemovalError):
    """Raised when the removal backend answers with a non-success status."""

    kind = ErrorKind.REMOTE_STATUS_ERROR


class MalformedResponseError(RemovalError):
    """Raised when the removal backend response has an unexpected shape."""

    kind = ErrorKind.MALFORMED_RESPONSE


class EmptyResultError(RemovalError):
    """Raised when the backend reports success but yields no image."""

    kind = ErrorKind.EMPTY_RESULT
