from resume_analyzer.analysis.analyzer import ResumeAnalyzer
from resume_analyzer.analysis.base import BaseResumeAnalyzer
from resume_analyzer.analysis.exceptions import (
    AnalysisError,
    EncodingError,
    FetchError,
    MalformedResponseError,
    NotInitializedError,
    PayloadTooLargeError,
    RemoteInvocationError,
    SchemaViolationError,
    UnsupportedMediaTypeError,
)
from resume_analyzer.analysis.factory import AnalyzerFactory
from resume_analyzer.analysis.models import AnalysisResult, Document, Improvement

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "AnalyzerFactory",
    "BaseResumeAnalyzer",
    "Document",
    "EncodingError",
    "FetchError",
    "Improvement",
    "MalformedResponseError",
    "NotInitializedError",
    "PayloadTooLargeError",
    "RemoteInvocationError",
    "ResumeAnalyzer",
    "SchemaViolationError",
    "UnsupportedMediaTypeError",
]
