"""End-to-end pipeline tests with real PDFs and no network."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest

from resume_analyzer.analysis.analyzer import ResumeAnalyzer
from resume_analyzer.analysis.document_fetcher import DocumentFetcher
from resume_analyzer.analysis.exceptions import PayloadTooLargeError, SchemaViolationError
from resume_analyzer.analysis.factory import AnalyzerFactory
from resume_analyzer.analysis.models import Document
from resume_analyzer.config.settings import Settings


def _settings(**kwargs: object) -> Settings:
    return Settings(_env_file=None, **kwargs)  # type: ignore[call-arg]


def _completion(content: str) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


class TestExampleProviderPipeline:
    def test_analyzes_in_memory_pdf(self, pdf_document: Document) -> None:
        analyzer = AnalyzerFactory.create(_settings(analysis_provider="example"))
        result = analyzer.analyze(pdf_document)
        assert result.score == 75
        assert result.improvements[0].category == "Achievements"
        assert len(result.strengths) == 3

    def test_analyzes_pdf_file(self, tmp_path: Path, sample_pdf_bytes: bytes) -> None:
        path = tmp_path / "jane_doe.pdf"
        path.write_bytes(sample_pdf_bytes)
        analyzer = AnalyzerFactory.create(_settings(analysis_provider="example"))
        assert analyzer.analyze_file(path).score == 75

    def test_size_limit_from_settings(self, pdf_document: Document) -> None:
        analyzer = AnalyzerFactory.create(
            _settings(analysis_provider="example", analysis_max_document_bytes=100)
        )
        with pytest.raises(PayloadTooLargeError):
            analyzer.analyze(pdf_document)


class TestOpenAIPipeline:
    def _analyzer(self, **overrides: object) -> tuple[ResumeAnalyzer, MagicMock]:
        mock_sdk = MagicMock()
        params: dict[str, object] = {
            "analysis_provider": "openai",
            "analysis_openai_api_key": "k",
            "analysis_openai_model_name": "gpt-4o-mini",
        }
        params.update(overrides)
        with patch(
            "resume_analyzer.analysis.openai_client_adapter.openai.OpenAI",
            return_value=mock_sdk,
        ):
            analyzer = AnalyzerFactory.create(_settings(**params))
        assert isinstance(analyzer, ResumeAnalyzer)
        return analyzer, mock_sdk

    def test_file_attachment_round_trip(self, pdf_document: Document) -> None:
        analyzer, mock_sdk = self._analyzer()
        mock_sdk.chat.completions.create.return_value = _completion(
            "```json\n" + json.dumps({
                "score": 88,
                "improvements": [{"category": "Summary", "suggestion": "Lead with impact"}],
                "strengths": ["Quantified achievements", "Clean layout", "Relevant skills"],
            }) + "\n```"
        )

        result = analyzer.analyze(pdf_document)

        assert result.score == 88
        assert result.strengths[0] == "Quantified achievements"
        kwargs = mock_sdk.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        file_part = kwargs["messages"][0]["content"][1]
        assert file_part["file"]["file_data"].startswith("data:application/pdf;base64,JVBER")

    def test_text_attachment_extracts_pdf_text(self, pdf_document: Document) -> None:
        analyzer, mock_sdk = self._analyzer(analysis_attachment_mode="text")
        mock_sdk.chat.completions.create.return_value = _completion(
            '{"score": 64, "improvements": [], "strengths": ["Concise"]}'
        )

        result = analyzer.analyze(pdf_document)

        assert result.score == 64
        text_part = mock_sdk.chat.completions.create.call_args.kwargs["messages"][0]["content"][1]
        assert "Jane Doe" in text_part["text"]

    def test_out_of_range_score_is_rejected(self, pdf_document: Document) -> None:
        analyzer, mock_sdk = self._analyzer()
        mock_sdk.chat.completions.create.return_value = _completion(
            '{"score": 140, "improvements": [], "strengths": []}'
        )
        with pytest.raises(SchemaViolationError):
            analyzer.analyze(pdf_document)


class TestUrlPipeline:
    def test_fetches_and_analyzes(self, sample_pdf_bytes: bytes) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, content=sample_pdf_bytes, headers={"Content-Type": "application/pdf"}
            )

        client = MagicMock()
        client.is_initialized = True
        client.create_completion.return_value = (
            '{"score": 70, "improvements": [], "strengths": []}'
        )
        analyzer = ResumeAnalyzer(
            client=client,
            model="m",
            fetcher=DocumentFetcher(transport=httpx.MockTransport(handler)),
        )

        result = analyzer.analyze_from_url("https://files.example.com/jane.pdf")

        assert result.score == 70
        request = client.create_completion.call_args.kwargs["request"]
        assert request.payload.decode() == sample_pdf_bytes
        assert request.payload.filename == "jane.pdf"

    def test_oversized_download_skips_inference(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                content=b"%PDF" + b"x" * (50 * 1024 * 1024),
                headers={"Content-Type": "application/pdf"},
            )

        client = MagicMock()
        client.is_initialized = True
        analyzer = ResumeAnalyzer(
            client=client,
            model="m",
            fetcher=DocumentFetcher(transport=httpx.MockTransport(handler)),
        )

        with pytest.raises(PayloadTooLargeError):
            analyzer.analyze_from_url("https://files.example.com/huge.pdf")
        client.create_completion.assert_not_called()

