from collections.abc import Iterable

from bgeraser.codec.media_codec import decode, encode
from bgeraser.logging.logger import Log
from bgeraser.processor.exceptions import RemovalFailedError
from bgeraser.processor.models import PipelineState
from bgeraser.processor.pipeline import PipelineContext, PipelineStep
from bgeraser.removal.client import BackgroundRemovalClient
from bgeraser.storage.artifact_store import (
    ArtifactStore,
    Bucket,
    extension_for_mime,
    extension_from_filename,
)
from bgeraser.validation.image_validator import ImageValidator
from bgeraser.validation.models import UploadRequest


def _require_upload(context: PipelineContext) -> UploadRequest:
    if context.upload is None:
        raise ValueError("PipelineContext.upload must be set after validation")
    return context.upload


class ValidateStep(PipelineStep):
    def __init__(self, validator: ImageValidator) -> None:
        self._validator = validator

    def run(self, context: PipelineContext) -> PipelineContext:
        self._validator.validate(context.upload)
        upload = _require_upload(context)
        context.state = PipelineState.VALIDATED
        Log.info(
            f"Validated upload '{upload.original_file_name}' "
            f"({upload.declared_mime_type}, {len(upload.file_bytes)} bytes)"
        )
        return context


class PersistOriginalStep(PipelineStep):
    def __init__(self, store: ArtifactStore, accepted_mime_types: Iterable[str]) -> None:
        self._store = store
        self._accepted_mime_types = frozenset(accepted_mime_types)

    def run(self, context: PipelineContext) -> PipelineContext:
        upload = _require_upload(context)
        extension = extension_from_filename(
            upload.original_file_name,
            upload.declared_mime_type,
            self._accepted_mime_types,
        )
        context.original_artifact = self._store.save(
            upload.file_bytes,
            extension,
            Bucket.INPUT,
            upload.declared_mime_type,
        )
        context.state = PipelineState.ORIGINAL_PERSISTED
        return context


class EncodeOriginalStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        upload = _require_upload(context)
        context.encoded_original = encode(upload.file_bytes, upload.declared_mime_type)
        context.state = PipelineState.REMOVAL_REQUESTED
        return context


class RemoveBackgroundStep(PipelineStep):
    def __init__(self, client: BackgroundRemovalClient) -> None:
        self._client = client

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.encoded_original is None:
            raise ValueError("PipelineContext.encoded_original must be set before removal")
        result = self._client.remove(context.encoded_original)
        context.removal_result = result
        if not result.succeeded:
            kind = result.error_kind
            if kind is None:
                raise ValueError("Failed removal result carries no error kind")
            raise RemovalFailedError(kind, result.detail)
        context.state = PipelineState.REMOVAL_COMPLETED
        return context


class PersistResultStep(PipelineStep):
    def __init__(self, store: ArtifactStore, accepted_mime_types: Iterable[str]) -> None:
        self._store = store
        self._accepted_mime_types = frozenset(accepted_mime_types)

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.removal_result is None or context.removal_result.image is None:
            raise ValueError("PipelineContext.removal_result must hold an image before persist")
        decoded = decode(context.removal_result.image.data_uri)
        extension = extension_for_mime(decoded.mime_type, self._accepted_mime_types)
        context.processed_artifact = self._store.save(
            decoded.data,
            extension,
            Bucket.OUTPUT,
            decoded.mime_type,
        )
        context.state = PipelineState.RESULT_PERSISTED
        return context
