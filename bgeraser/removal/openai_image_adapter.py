import httpx
import openai

from bgeraser.codec.media_codec import EncodedImage, decode
from bgeraser.errors import truncate
from bgeraser.logging.logger import Log
from bgeraser.removal.base import BaseBackgroundRemover
from bgeraser.removal.exceptions import (
    EmptyResultError,
    MalformedResponseError,
    RemoteStatusError,
    TransportError,
)

MAX_MESSAGE_CHARS = 300


class OpenAIImageRemover(BaseBackgroundRemover):
    """Background removal by instructing a generative image model.

    The model gets the image plus a natural-language instruction and answers
    with the edited image inline, so there is no second fetch.
    """

    OUTPUT_FORMAT = "png"

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        prompt: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._model = model
        self._prompt = prompt

    def remove_background(self, image: EncodedImage) -> EncodedImage:
        decoded = decode(image.data_uri)
        extension = decoded.mime_type.split("/")[-1] or "png"
        try:
            response = self._client.images.edit(
                model=self._model,
                image=(f"upload.{extension}", decoded.data, decoded.mime_type),
                prompt=self._prompt,
                background="transparent",
                output_format=self.OUTPUT_FORMAT,
                n=1,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TransportError(f"Image model network error: {exc}") from exc
        except openai.APIStatusError as exc:
            raise RemoteStatusError(
                f"Image model returned HTTP {exc.status_code}: "
                f"{truncate(exc.message, MAX_MESSAGE_CHARS)}"
            ) from exc
        except openai.APIResponseValidationError as exc:
            raise MalformedResponseError(f"Image model response invalid: {exc}") from exc
        except openai.APIError as exc:
            raise TransportError(f"Image model API error: {exc}") from exc

        if not response.data:
            raise EmptyResultError("Image model returned no images")
        payload = response.data[0].b64_json
        if not payload:
            raise EmptyResultError(
                "Background removal failed. No processed image data returned."
            )
        Log.debug(f"Image model returned {len(payload)} base64 chars")
        return EncodedImage(
            mime_type=f"image/{self.OUTPUT_FORMAT}",
            base64_payload=payload,
        )
