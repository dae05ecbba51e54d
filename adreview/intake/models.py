from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedFile:
    """A multipart upload read fully into memory for one request."""

    filename: str
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)
