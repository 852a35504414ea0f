import base64

import pytest

from bgeraser.codec.exceptions import MalformedEncodingError
from bgeraser.codec.media_codec import DEFAULT_MIME_TYPE, EncodedImage, decode, encode
from bgeraser.errors import ErrorKind


class TestEncode:
    def test_builds_data_uri(self) -> None:
        encoded = encode(b"abc", "image/png")
        assert encoded == EncodedImage(mime_type="image/png", base64_payload="YWJj")
        assert encoded.data_uri == "data:image/png;base64,YWJj"

    def test_encodes_empty_bytes(self) -> None:
        assert encode(b"", "image/png").data_uri == "data:image/png;base64,"

    def test_rejects_empty_mime_type(self) -> None:
        with pytest.raises(ValueError, match="mime_type"):
            encode(b"abc", "")


class TestRoundTrip:
    @pytest.mark.parametrize(
        "payload",
        [b"", b"\x00", bytes(range(256)), b"\x89PNG\r\n\x1a\n" + b"\xff" * 1000],
    )
    def test_bytes_survive(self, payload: bytes) -> None:
        decoded = decode(encode(payload, "image/png").data_uri)
        assert decoded.data == payload
        assert decoded.mime_type == "image/png"

    def test_real_image_survives(self, jpeg_bytes: bytes) -> None:
        decoded = decode(encode(jpeg_bytes, "image/jpeg").data_uri)
        assert decoded.data == jpeg_bytes
        assert decoded.mime_type == "image/jpeg"


class TestDecode:
    def test_missing_separator_is_malformed(self) -> None:
        with pytest.raises(MalformedEncodingError, match="Invalid Data URI format"):
            decode("data:image/png;base64")

    def test_extra_separator_is_malformed(self) -> None:
        with pytest.raises(MalformedEncodingError):
            decode("data:image/png;base64,YWJj,YWJj")

    def test_missing_base64_marker_is_malformed(self) -> None:
        with pytest.raises(MalformedEncodingError, match="not base64"):
            decode("data:image/png,YWJj")

    def test_invalid_characters_are_malformed(self) -> None:
        with pytest.raises(MalformedEncodingError, match="Invalid base64"):
            decode("data:image/png;base64,@@@@")

    def test_bad_padding_is_malformed(self) -> None:
        with pytest.raises(MalformedEncodingError):
            decode("data:image/png;base64,YWJ")

    def test_error_kind(self) -> None:
        with pytest.raises(MalformedEncodingError) as exc_info:
            decode("garbage")
        assert exc_info.value.kind is ErrorKind.MALFORMED_ENCODING

    def test_missing_mime_defaults_to_octet_stream(self) -> None:
        payload = base64.b64encode(b"xyz").decode()
        decoded = decode(f"data:;base64,{payload}")
        assert decoded.data == b"xyz"
        assert decoded.mime_type == DEFAULT_MIME_TYPE

    def test_unprefixed_meta_defaults_to_octet_stream(self) -> None:
        decoded = decode(";base64,YWJj")
        assert decoded.data == b"abc"
        assert decoded.mime_type == DEFAULT_MIME_TYPE
