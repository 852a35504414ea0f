"""Background removal through an external HTTP service.

Flow: POST the image as multipart field `image` -> read `data.url` from the
JSON body -> GET that URL (following redirects) -> re-encode the bytes with
the reported MIME type. Each request is a single attempt.
"""

from typing import Any
from urllib.parse import urljoin

import httpx

from bgeraser.codec.media_codec import EncodedImage, decode, encode
from bgeraser.errors import truncate
from bgeraser.logging.logger import Log
from bgeraser.removal.base import BaseBackgroundRemover
from bgeraser.removal.exceptions import (
    EmptyResultError,
    MalformedResponseError,
    RemoteStatusError,
    TransportError,
)

DEFAULT_RESULT_MIME_TYPE = "image/png"
MAX_BODY_CHARS = 300


class RemoteServiceRemover(BaseBackgroundRemover):
    """Delegates background removal to a fixed external endpoint."""

    def __init__(
        self,
        *,
        endpoint: str,
        timeout_seconds: int,
        api_key: str = "",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._timeout = httpx.Timeout(timeout_seconds)
        self._api_key = api_key
        self._transport = transport

    def remove_background(self, image: EncodedImage) -> EncodedImage:
        decoded = decode(image.data_uri)
        with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
            result_url = self._submit(client, decoded.data, decoded.mime_type)
            Log.info(f"Removal service returned result URL {result_url}")
            data, mime_type = self._fetch_result(client, result_url)
        Log.info(f"Fetched {len(data)} bytes of {mime_type} from removal service")
        return encode(data, mime_type)

    def _submit(self, client: httpx.Client, data: bytes, mime_type: str) -> str:
        extension = mime_type.split("/")[-1] or "png"
        files = {"image": (f"upload.{extension}", data, mime_type)}
        try:
            response = client.post(self._endpoint, files=files, headers=self._headers())
        except httpx.HTTPError as exc:
            raise TransportError(f"Removal service request failed: {exc}") from exc

        self._raise_for_status(response, "Removal service")
        payload = self._parse_json(response)
        url = self._extract_url(payload)
        try:
            return urljoin(self._endpoint, url)
        except ValueError as exc:
            raise MalformedResponseError(f"'data.url' is not a usable URL: {exc}") from exc

    def _fetch_result(self, client: httpx.Client, url: str) -> tuple[bytes, str]:
        try:
            response = client.get(url, follow_redirects=True)
        except httpx.InvalidURL as exc:
            raise MalformedResponseError(f"'data.url' is not a usable URL: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Result fetch failed: {exc}") from exc

        self._raise_for_status(response, "Result fetch")
        if not response.content:
            raise EmptyResultError(
                "Background removal failed. No processed image data returned."
            )
        content_type = response.headers.get("content-type", "")
        mime_type = content_type.split(";", 1)[0].strip() or DEFAULT_RESULT_MIME_TYPE
        return response.content, mime_type

    def _headers(self) -> dict[str, str]:
        if self._api_key:
            return {"X-Api-Key": self._api_key}
        return {}

    @staticmethod
    def _raise_for_status(response: httpx.Response, source: str) -> None:
        if response.is_success:
            return
        body = truncate(response.text, MAX_BODY_CHARS)
        raise RemoteStatusError(f"{source} returned HTTP {response.status_code}: {body}")

    @staticmethod
    def _parse_json(response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Removal service returned invalid JSON: {exc}"
            ) from exc
        Log.debug(f"Removal service raw response: {truncate(str(payload), MAX_BODY_CHARS)}")
        if not isinstance(payload, dict):
            raise MalformedResponseError("Removal service response must be an object")
        return payload

    @staticmethod
    def _extract_url(payload: dict[str, Any]) -> str:
        data = payload.get("data")
        if not isinstance(data, dict):
            raise MalformedResponseError("Removal service response lacks a 'data' object")
        url = data.get("url")
        if url is None or url == "":
            raise EmptyResultError(
                "Background removal failed. No processed image data returned."
            )
        if not isinstance(url, str):
            raise MalformedResponseError("'data.url' must be a string")
        return url
