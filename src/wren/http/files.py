"""Uploaded file metadata."""

from dataclasses import dataclass
from pathlib import PurePosixPath


@dataclass(frozen=True, slots=True)
class UploadedFile:
    """An uploaded file from a multipart form submission.

    Only the metadata validation needs: the client-supplied name,
    declared content type, and size in bytes.
    """

    filename: str
    content_type: str = "application/octet-stream"
    size: int = 0

    @property
    def extension(self) -> str:
        """Lowercased filename suffix without the dot (``""`` if none)."""
        return PurePosixPath(self.filename).suffix.lstrip(".").lower()

    def __repr__(self) -> str:
        return f"UploadedFile({self.filename!r}, {self.content_type!r}, {self.size} bytes)"
