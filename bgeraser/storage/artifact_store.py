import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath

from bgeraser.logging.logger import Log
from bgeraser.storage.exceptions import StorageWriteFailedError

DEFAULT_EXTENSION = ".png"


class Bucket(str, Enum):
    """Logical buckets; each maps to a directory under the storage root."""

    INPUT = "images-input"
    OUTPUT = "images-output"


@dataclass(frozen=True)
class ArtifactRecord:
    """A persisted image with its public locator."""

    locator: str
    mime_type: str
    size_bytes: int


def _accepted_subtypes(accepted_mime_types: Iterable[str]) -> set[str]:
    return {m.split("/")[-1].lower() for m in accepted_mime_types}


def extension_for_mime(mime_type: str, accepted_mime_types: Iterable[str]) -> str:
    """Extension for a MIME type; falls back to .png for odd MIME types."""
    subtype = mime_type.split("/")[-1].lower() if "/" in mime_type else ""
    if subtype and subtype in _accepted_subtypes(accepted_mime_types):
        return f".{subtype}"
    return DEFAULT_EXTENSION


def extension_from_filename(
    file_name: str,
    mime_type: str,
    accepted_mime_types: Iterable[str],
) -> str:
    """Pick an extension for an upload.

    The client's suffix is kept only when it names an accepted image type
    (e.g. `.JPG` -> `.jpg`). Anything else falls back to the validated MIME
    type, so the stored name never carries a client-chosen extension such as
    `.html`.
    """
    suffix = PurePosixPath(file_name).suffix.lower() if file_name else ""
    if suffix and suffix[1:] in _accepted_subtypes(accepted_mime_types):
        return suffix
    return extension_for_mime(mime_type, accepted_mime_types)


class ArtifactStore:
    """Writes blobs under {storage_root}/{bucket}/ with collision-free names.

    Files are created exclusively, so an existing artifact is never touched.
    """

    OUTPUT_SUFFIX = "-processed"

    def __init__(self, storage_root: Path, public_base_url: str = "") -> None:
        self._storage_root = storage_root
        self._public_base_url = public_base_url.rstrip("/")

    @property
    def storage_root(self) -> Path:
        return self._storage_root

    def bucket_path(self, bucket: Bucket) -> Path:
        return self._storage_root / bucket.value

    def ensure_buckets(self) -> None:
        """Create every bucket directory."""
        for bucket in Bucket:
            self.bucket_path(bucket).mkdir(parents=True, exist_ok=True)

    def save(
        self,
        data: bytes,
        extension: str,
        bucket: Bucket,
        mime_type: str,
    ) -> ArtifactRecord:
        """Persist data as a new artifact and return its record.

        Raises:
            StorageWriteFailedError: if the directory or file cannot be written.
        """
        filename = self._new_filename(extension, bucket)
        path = self.bucket_path(bucket) / filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("xb") as fh:
                fh.write(data)
        except OSError as exc:
            raise StorageWriteFailedError(
                f"Failed to write artifact to {bucket.value}: {exc}"
            ) from exc

        record = ArtifactRecord(
            locator=self._locator(bucket, filename),
            mime_type=mime_type,
            size_bytes=len(data),
        )
        Log.info("Saved artifact", locator=record.locator, size_bytes=record.size_bytes)
        return record

    def _new_filename(self, extension: str, bucket: Bucket) -> str:
        if extension and not extension.startswith("."):
            extension = f".{extension}"
        suffix = self.OUTPUT_SUFFIX if bucket is Bucket.OUTPUT else ""
        return f"{uuid.uuid4()}{suffix}{extension}"

    def _locator(self, bucket: Bucket, filename: str) -> str:
        return f"{self._public_base_url}/{bucket.value}/{filename}"
