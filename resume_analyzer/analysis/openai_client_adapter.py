import binascii

import httpx
import openai

from resume_analyzer.analysis.client_base import BaseInferenceClient
from resume_analyzer.analysis.exceptions import (
    EncodingError,
    NotInitializedError,
    RemoteInvocationError,
)
from resume_analyzer.analysis.models import AnalysisRequest
from resume_analyzer.logging.logger import Log
from resume_analyzer.pdf.base import BasePdfExtractor
from resume_analyzer.pdf.exceptions import PdfExtractionError

ATTACHMENT_MODES = ("file", "text")


class OpenAIClientAdapter(BaseInferenceClient):
    """Inference client built on the OpenAI-compatible chat API.

    In ``file`` mode the PDF is attached as a base64 file part. In ``text``
    mode its text is extracted locally and sent inline, for providers that
    do not accept PDF attachments.
    """

    DEFAULT_FILENAME = "resume.pdf"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        max_retries: int = 0,
        attachment_mode: str = "file",
        pdf_extractor: BasePdfExtractor | None = None,
    ) -> None:
        if attachment_mode not in ATTACHMENT_MODES:
            raise ValueError(
                f"Unknown attachment mode '{attachment_mode}'. Choose from: {list(ATTACHMENT_MODES)}"
            )
        if attachment_mode == "text" and pdf_extractor is None:
            raise ValueError("pdf_extractor is required for attachment_mode=text")
        self._attachment_mode = attachment_mode
        self._pdf_extractor = pdf_extractor
        self._client: openai.OpenAI | None = None
        if api_key:
            self._client = openai.OpenAI(
                api_key=api_key,
                timeout=timeout_seconds,
                base_url=base_url,
                max_retries=max_retries,
            )

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        request: AnalysisRequest,
    ) -> str:
        if self._client is None:
            raise NotInitializedError("Inference client has no API key configured")
        content = self._build_user_content(request)
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "resume_analysis",
                        "strict": True,
                        "schema": request.json_schema,
                    },
                },
                messages=[{"role": "user", "content": content}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise RemoteInvocationError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise RemoteInvocationError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise RemoteInvocationError("AI returned no choices")
        text = response.choices[0].message.content
        if text is None:
            raise RemoteInvocationError("AI returned empty response")
        return text

    def _build_user_content(self, request: AnalysisRequest) -> list[dict[str, object]]:
        if self._attachment_mode == "text":
            resume_text = self._extract_text(request)
            return [
                {"type": "text", "text": request.prompt},
                {"type": "text", "text": f"Resume text:\n{resume_text}"},
            ]
        return [
            {"type": "text", "text": request.prompt},
            {
                "type": "file",
                "file": {
                    "filename": request.payload.filename or self.DEFAULT_FILENAME,
                    "file_data": request.payload.as_data_url(),
                },
            },
        ]

    def _extract_text(self, request: AnalysisRequest) -> str:
        if self._pdf_extractor is None:
            raise ValueError("pdf_extractor must be set for text attachments")
        try:
            pdf_bytes = request.payload.decode()
        except (binascii.Error, ValueError) as exc:
            raise EncodingError(f"Payload is not valid base64: {exc}") from exc
        try:
            text = self._pdf_extractor.extract(pdf_bytes)
        except PdfExtractionError as exc:
            raise EncodingError(f"Failed to extract resume text: {exc}") from exc
        if not text:
            raise EncodingError("PDF contains no extractable text")
        Log.debug(f"Extracted {len(text)} chars for text attachment")
        return text
