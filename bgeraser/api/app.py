"""FastAPI layer exposing the upload pipeline.

Endpoints:
 - GET /health
 - POST /api/remove-background
 - GET /images-input/*, /images-output/* (stored artifacts)
"""

from fastapi import FastAPI, File, UploadFile
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from bgeraser.api.schemas import PipelineOutcomeResponse
from bgeraser.config.settings import Settings
from bgeraser.errors import ErrorKind
from bgeraser.processor.processor import UploadOrchestrator, build_orchestrator
from bgeraser.storage.artifact_store import ArtifactStore, Bucket
from bgeraser.validation.models import UploadRequest

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.MISSING_FILE: 400,
    ErrorKind.UNSUPPORTED_TYPE: 415,
    ErrorKind.TOO_LARGE: 413,
    ErrorKind.STORAGE_WRITE_FAILED: 500,
    ErrorKind.TRANSPORT_ERROR: 502,
    ErrorKind.REMOTE_STATUS_ERROR: 502,
    ErrorKind.MALFORMED_RESPONSE: 502,
    ErrorKind.EMPTY_RESULT: 502,
    ErrorKind.MALFORMED_ENCODING: 502,
    ErrorKind.UNEXPECTED_ERROR: 500,
}


def _read_upload(image: UploadFile | None) -> UploadRequest | None:
    if image is None:
        return None
    return UploadRequest(
        file_bytes=image.file.read(),
        declared_mime_type=image.content_type or "",
        original_file_name=image.filename or "",
    )


def create_app(
    settings: Settings,
    orchestrator: UploadOrchestrator | None = None,
) -> FastAPI:
    """Build the application, mounting both artifact buckets as static files.

    The mounts serve the orchestrator's own store, so an injected pipeline
    with a different storage root is served from that root.
    """
    pipeline = orchestrator if orchestrator is not None else build_orchestrator(settings)
    store = pipeline.store
    if store is None:
        store = ArtifactStore(settings.storage_root, settings.public_base_url)
    store.ensure_buckets()

    app = FastAPI(title="Background Eraser", version="0.1.0")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/remove-background", response_model=PipelineOutcomeResponse)
    def remove_background(image: UploadFile | None = File(None)) -> JSONResponse:
        outcome = pipeline.process(_read_upload(image))
        body = PipelineOutcomeResponse.from_outcome(outcome)
        status_code = 200 if outcome.error_kind is None else STATUS_BY_KIND[outcome.error_kind]
        return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

    for bucket in Bucket:
        app.mount(
            f"/{bucket.value}",
            StaticFiles(directory=store.bucket_path(bucket)),
            name=bucket.value,
        )
    return app
