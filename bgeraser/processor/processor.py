from collections.abc import Sequence
from pathlib import Path

from bgeraser.config.settings import Settings
from bgeraser.errors import BgEraserError, ErrorKind, truncate
from bgeraser.logging.logger import Log
from bgeraser.processor.models import PipelineOutcome, PipelineState
from bgeraser.processor.pipeline import PipelineContext, PipelineStep
from bgeraser.processor.steps import (
    EncodeOriginalStep,
    PersistOriginalStep,
    PersistResultStep,
    RemoveBackgroundStep,
    ValidateStep,
)
from bgeraser.removal.base import BaseBackgroundRemover
from bgeraser.removal.client import BackgroundRemovalClient
from bgeraser.removal.factory import RemoverFactory
from bgeraser.storage.artifact_store import ArtifactStore
from bgeraser.validation.image_validator import ImageValidator
from bgeraser.validation.models import UploadRequest

SUCCESS_MESSAGE = "Image processed successfully!"
UNEXPECTED_MESSAGE = "An unexpected error occurred during processing."


class UploadOrchestrator:
    """Runs one upload through the pipeline and reports a single outcome.

    Pipeline: validate -> persist original -> encode -> remove background ->
    persist result. Any failure stops the run; the original artifact, if it
    was already saved, is still reported. Nothing is raised to the caller.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        error_detail_max_chars: int = 300,
        store: ArtifactStore | None = None,
    ) -> None:
        self._steps = list(steps)
        self._error_detail_max_chars = error_detail_max_chars
        self._store = store

    @property
    def store(self) -> ArtifactStore | None:
        """Store the steps write into, when built by build_orchestrator."""
        return self._store

    def process(self, upload: UploadRequest | None) -> PipelineOutcome:
        """Run the full pipeline for one upload."""
        name = upload.original_file_name if upload is not None else "<none>"
        Log.info(f"Processing upload '{name}'")
        context = PipelineContext(upload=upload)
        try:
            for step in self._steps:
                context = step.run(context)
        except BgEraserError as exc:
            return self._fail(context, exc.kind, str(exc))
        except Exception as exc:
            Log.exception(f"Unexpected error while processing upload '{name}'")
            return self._fail(context, ErrorKind.UNEXPECTED_ERROR, str(exc) or UNEXPECTED_MESSAGE)

        context.state = PipelineState.DONE
        Log.info(f"Upload '{name}' processed successfully")
        return PipelineOutcome(
            original_artifact=context.original_artifact,
            processed_artifact=context.processed_artifact,
            status_message=SUCCESS_MESSAGE,
        )

    def _fail(
        self,
        context: PipelineContext,
        kind: ErrorKind,
        detail: str,
    ) -> PipelineOutcome:
        failed_at = context.state
        context.state = PipelineState.FAILED
        Log.error(f"Upload failed: {detail}", kind=kind.value, state=failed_at.value)
        return PipelineOutcome(
            original_artifact=context.original_artifact,
            processed_artifact=None,
            error_kind=kind,
            error_detail=truncate(detail, self._error_detail_max_chars),
            failed_at=failed_at,
        )


def build_orchestrator(
    settings: Settings,
    storage_root: Path | None = None,
    remover: BaseBackgroundRemover | None = None,
) -> UploadOrchestrator:
    """Build an UploadOrchestrator with all required collaborators."""
    store = ArtifactStore(
        storage_root=storage_root if storage_root is not None else settings.storage_root,
        public_base_url=settings.public_base_url,
    )
    validator = ImageValidator(
        max_bytes=settings.max_upload_bytes,
        accepted_mime_types=settings.accepted_mime_types,
    )
    client = BackgroundRemovalClient(
        remover if remover is not None else RemoverFactory.create(settings)
    )
    steps: list[PipelineStep] = [
        ValidateStep(validator),
        PersistOriginalStep(store, validator.accepted_mime_types),
        EncodeOriginalStep(),
        RemoveBackgroundStep(client),
        PersistResultStep(store, validator.accepted_mime_types),
    ]
    return UploadOrchestrator(
        steps,
        error_detail_max_chars=settings.error_detail_max_chars,
        store=store,
    )
