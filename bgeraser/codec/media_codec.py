"""Data URI codec shared by every pipeline component.

An encoded image is `data:<mime>;base64,<payload>`. Decoding is strict about
the payload and lenient about the MIME tag.
"""

import base64
import binascii
import re
from dataclasses import dataclass

from bgeraser.codec.exceptions import MalformedEncodingError

DEFAULT_MIME_TYPE = "application/octet-stream"

_MIME_RE = re.compile(r"^data:(.*?);")


@dataclass(frozen=True)
class EncodedImage:
    """Image bytes carried as a MIME type plus base64 payload."""

    mime_type: str
    base64_payload: str

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64_payload}"


@dataclass(frozen=True)
class DecodedImage:
    """Raw image bytes recovered from an encoded image."""

    data: bytes
    mime_type: str


def encode(data: bytes, mime_type: str) -> EncodedImage:
    """Wrap raw bytes into an EncodedImage.

    Raises:
        ValueError: if mime_type is empty.
    """
    if not mime_type:
        raise ValueError("mime_type must be a non-empty string")
    payload = base64.b64encode(data).decode("ascii")
    return EncodedImage(mime_type=mime_type, base64_payload=payload)


def decode(data_uri: str) -> DecodedImage:
    """Decode a data URI into bytes and its MIME type.

    Raises:
        MalformedEncodingError: on a missing separator, a missing ';base64'
            marker, or a payload that is not valid base64.
    """
    parts = data_uri.split(",")
    if len(parts) != 2:
        raise MalformedEncodingError("Invalid Data URI format")
    meta, payload = parts
    if ";base64" not in meta:
        raise MalformedEncodingError("Data URI is not base64 encoded")

    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedEncodingError(f"Invalid base64 payload: {exc}") from exc

    match = _MIME_RE.match(meta)
    mime_type = match.group(1) if match and match.group(1) else DEFAULT_MIME_TYPE
    return DecodedImage(data=data, mime_type=mime_type)
