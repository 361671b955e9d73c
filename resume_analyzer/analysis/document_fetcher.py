from urllib.parse import urlsplit

import httpx

from resume_analyzer.analysis.exceptions import FetchError, PayloadTooLargeError
from resume_analyzer.analysis.models import DEFAULT_MAX_DOCUMENT_BYTES, Document
from resume_analyzer.logging.logger import Log

_FALLBACK_MEDIA_TYPE = "application/octet-stream"


class DocumentFetcher:
    """Downloads a remote document in one blocking, size-capped request."""

    def __init__(
        self,
        *,
        timeout_seconds: float = 30,
        max_document_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._max_document_bytes = max_document_bytes
        self._transport = transport

    def fetch(self, url: str) -> Document:
        """Fetch ``url`` and wrap the body as a Document.

        The body is streamed and reading stops as soon as it exceeds
        ``max_document_bytes``. The media type comes from Content-Type.

        Raises:
            FetchError: on transport errors or a non-2xx status.
            PayloadTooLargeError: if the body is larger than the limit.
        """
        try:
            with httpx.Client(
                timeout=self._timeout_seconds,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                with client.stream("GET", url) as response:
                    if not response.is_success:
                        raise FetchError(f"Failed to fetch {url}: HTTP {response.status_code}")
                    self._check_declared_length(url, response)
                    content = self._read_capped(url, response)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc

        Log.debug(f"Fetched {len(content)} bytes from {url}")
        return Document(
            content=content,
            media_type=_media_type(response),
            filename=_filename(url),
        )

    def _check_declared_length(self, url: str, response: httpx.Response) -> None:
        declared = response.headers.get("content-length", "").strip()
        if declared.isdigit() and int(declared) > self._max_document_bytes:
            raise PayloadTooLargeError(
                f"{url} declares {declared} bytes; "
                f"the limit is {self._max_document_bytes} bytes"
            )

    def _read_capped(self, url: str, response: httpx.Response) -> bytes:
        chunks: list[bytes] = []
        received = 0
        for chunk in response.iter_bytes():
            received += len(chunk)
            if received > self._max_document_bytes:
                raise PayloadTooLargeError(
                    f"{url} is larger than the limit of {self._max_document_bytes} bytes"
                )
            chunks.append(chunk)
        return b"".join(chunks)


def _media_type(response: httpx.Response) -> str:
    header = response.headers.get("content-type", "")
    media_type = header.split(";", 1)[0].strip().lower()
    return media_type or _FALLBACK_MEDIA_TYPE


def _filename(url: str) -> str | None:
    name = urlsplit(url).path.rsplit("/", 1)[-1]
    return name or None
