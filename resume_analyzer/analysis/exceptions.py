class AnalysisError(Exception):
    """Base exception for all resume analysis failures."""


class NotInitializedError(AnalysisError):
    """Raised when the inference client has no credentials configured."""


class UnsupportedMediaTypeError(AnalysisError):
    """Raised when the document is not a PDF."""


class PayloadTooLargeError(AnalysisError):
    """Raised when the document exceeds the configured size ceiling."""


class EncodingError(AnalysisError):
    """Raised when document bytes cannot be read or encoded for transport."""


class FetchError(AnalysisError):
    """Raised when a remote document cannot be downloaded."""


class RemoteInvocationError(AnalysisError):
    """Raised when the inference provider call fails (network, API, empty reply)."""


class MalformedResponseError(AnalysisError):
    """Raised when the provider reply is not a JSON object.

    The unparsed reply is kept on ``raw_response`` for diagnostics.
    """

    def __init__(self, message: str, raw_response: str) -> None:
        super().__init__(message)
        self.raw_response = raw_response


class SchemaViolationError(AnalysisError):
    """Raised when a parsed reply does not satisfy the analysis result contract."""
