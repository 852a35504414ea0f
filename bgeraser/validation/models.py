from dataclasses import dataclass


@dataclass(frozen=True)
class UploadRequest:
    """An inbound image upload, discarded once processed."""

    file_bytes: bytes
    declared_mime_type: str
    original_file_name: str
