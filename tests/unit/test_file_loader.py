from pathlib import Path

import pytest

from resume_analyzer.analysis.exceptions import EncodingError
from resume_analyzer.analysis.file_loader import FileLoader, guess_media_type


class TestLoad:
    def test_returns_document(self, tmp_path: Path) -> None:
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"%PDF test content")

        doc = FileLoader().load(path)

        assert doc.content == b"%PDF test content"
        assert doc.media_type == "application/pdf"
        assert doc.filename == "resume.pdf"
        assert doc.size_bytes == 17

    def test_missing_file_raises_encoding_error(self, tmp_path: Path) -> None:
        with pytest.raises(EncodingError, match="missing.pdf"):
            FileLoader().load(tmp_path / "missing.pdf")

    def test_directory_raises_encoding_error(self, tmp_path: Path) -> None:
        with pytest.raises(EncodingError):
            FileLoader().load(tmp_path)


class TestGuessMediaType:
    def test_pdf(self) -> None:
        assert guess_media_type("CV.PDF") == "application/pdf"

    def test_text(self) -> None:
        assert guess_media_type("notes.txt") == "text/plain"

    def test_unknown_extension(self) -> None:
        assert guess_media_type("resume") == "application/octet-stream"
