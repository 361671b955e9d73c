import mimetypes
from pathlib import Path

from resume_analyzer.analysis.exceptions import EncodingError
from resume_analyzer.analysis.models import Document

_FALLBACK_MEDIA_TYPE = "application/octet-stream"


def guess_media_type(filename: str) -> str:
    """Guess a media type from the file extension."""
    media_type, _ = mimetypes.guess_type(filename)
    return media_type or _FALLBACK_MEDIA_TYPE


class FileLoader:
    """Reads a local file fully into memory as a Document."""

    def load(self, path: Path) -> Document:
        """Read document bytes from disk.

        Raises:
            EncodingError: if the file cannot be read.
        """
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise EncodingError(f"Failed to read {path}: {exc}") from exc
        return Document(
            content=content,
            media_type=guess_media_type(path.name),
            filename=path.name,
        )
