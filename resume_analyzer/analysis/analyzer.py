"""AI-powered resume analyzer."""

from collections.abc import Callable
from pathlib import Path

from resume_analyzer.analysis.base import BaseResumeAnalyzer
from resume_analyzer.analysis.client_base import BaseInferenceClient
from resume_analyzer.analysis.document_fetcher import DocumentFetcher
from resume_analyzer.analysis.encoder import encode
from resume_analyzer.analysis.exceptions import (
    AnalysisError,
    MalformedResponseError,
    NotInitializedError,
    PayloadTooLargeError,
    SchemaViolationError,
    UnsupportedMediaTypeError,
)
from resume_analyzer.analysis.file_loader import FileLoader
from resume_analyzer.analysis.models import (
    DEFAULT_MAX_DOCUMENT_BYTES,
    PDF_MEDIA_TYPE,
    AnalysisRequest,
    AnalysisResult,
    Document,
)
from resume_analyzer.analysis.prompt_loader import compose_prompt, load_response_schema
from resume_analyzer.analysis.validator import normalize_response
from resume_analyzer.logging.logger import Log


class ResumeAnalyzer(BaseResumeAnalyzer):
    """Scores PDF resumes with an AI provider.

    Each call validates the document, encodes it, sends one request and
    validates the reply. Nothing is retried; the first failure propagates.
    """

    def __init__(
        self,
        *,
        client: BaseInferenceClient,
        model: str,
        temperature: float = 0.0,
        max_document_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES,
        fetcher: DocumentFetcher | None = None,
        file_loader: FileLoader | None = None,
        prompt: str | None = None,
        json_schema: dict[str, object] | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_document_bytes = max_document_bytes
        self._fetcher = fetcher if fetcher is not None else DocumentFetcher(max_document_bytes=max_document_bytes)
        self._file_loader = file_loader if file_loader is not None else FileLoader()
        self._prompt = prompt if prompt is not None else compose_prompt()
        self._json_schema = json_schema if json_schema is not None else load_response_schema()

    def analyze(self, document: Document) -> AnalysisResult:
        return self._run(document.filename or "in-memory document", lambda: document)

    def analyze_from_url(self, url: str) -> AnalysisResult:
        return self._run(url, lambda: self._fetcher.fetch(url))

    def analyze_file(self, path: Path) -> AnalysisResult:
        return self._run(str(path), lambda: self._file_loader.load(path))

    def _run(self, source: str, load: Callable[[], Document]) -> AnalysisResult:
        Log.info(f"Analyzing resume from {source}")
        try:
            self._ensure_initialized()
            result = self._analyze(load())
        except AnalysisError as exc:
            Log.error(f"Resume analysis failed for {source}: {type(exc).__name__}: {exc}")
            raise
        Log.info(
            f"Analysis complete for {source}: score {result.score:g}, "
            f"{len(result.improvements)} improvements, {len(result.strengths)} strengths"
        )
        return result

    def _ensure_initialized(self) -> None:
        if not self._client.is_initialized:
            raise NotInitializedError(
                "Inference client is not initialized; configure an API key first"
            )

    def _analyze(self, document: Document) -> AnalysisResult:
        self._check_document(document)
        request = AnalysisRequest(
            prompt=self._prompt,
            payload=encode(document),
            json_schema=self._json_schema,
        )
        Log.debug(
            f"Analysis prompt: {len(request.prompt)} chars, "
            f"attachment {request.payload.media_type} ({document.size_bytes} bytes)"
        )

        raw_response = self._client.create_completion(
            model=self._model,
            temperature=self._temperature,
            request=request,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        try:
            return normalize_response(raw_response)
        except (MalformedResponseError, SchemaViolationError) as exc:
            Log.error(f"Rejected AI response ({exc}):\n{raw_response}")
            raise

    def _check_document(self, document: Document) -> None:
        if document.media_type != PDF_MEDIA_TYPE:
            raise UnsupportedMediaTypeError(
                f"Only PDF files are supported, got '{document.media_type}'"
            )
        if document.size_bytes > self._max_document_bytes:
            raise PayloadTooLargeError(
                f"Document is {document.size_bytes} bytes; "
                f"the limit is {self._max_document_bytes} bytes"
            )
