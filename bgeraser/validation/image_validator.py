from collections.abc import Iterable

from bgeraser.validation.exceptions import (
    FileTooLargeError,
    MissingFileError,
    UnsupportedTypeError,
)
from bgeraser.validation.models import UploadRequest


class ImageValidator:
    """Enforces presence, type and size policy on an inbound upload.

    Checks run in that order and stop at the first failure, so an oversized
    file of the wrong type always reports the type.
    """

    def __init__(self, max_bytes: int, accepted_mime_types: Iterable[str]) -> None:
        self._max_bytes = max_bytes
        self._accepted = frozenset(m.lower() for m in accepted_mime_types)

    @property
    def accepted_mime_types(self) -> frozenset[str]:
        return self._accepted

    def validate(self, upload: UploadRequest | None) -> None:
        """Raise an ImageRejectedError subclass if the upload is not acceptable."""
        if upload is None or not upload.file_bytes:
            raise MissingFileError("No image file provided.")
        if upload.declared_mime_type.lower() not in self._accepted:
            raise UnsupportedTypeError(
                f"Invalid file type. Only {self._format_types()} are allowed."
            )
        if len(upload.file_bytes) > self._max_bytes:
            raise FileTooLargeError(
                f"File is too large. Maximum size is {self._format_limit()}."
            )

    def _format_types(self) -> str:
        subtypes = sorted({m.split("/")[-1].upper() for m in self._accepted})
        return ", ".join(subtypes)

    def _format_limit(self) -> str:
        megabytes = self._max_bytes / (1024 * 1024)
        if megabytes >= 1:
            return f"{megabytes:g}MB"
        return f"{self._max_bytes} bytes"
