from abc import ABC, abstractmethod
from pathlib import Path

from resume_analyzer.analysis.models import AnalysisResult, Document


class BaseResumeAnalyzer(ABC):
    """Contract for resume analysis entry points."""

    @abstractmethod
    def analyze(self, document: Document) -> AnalysisResult:
        """Score an in-memory PDF resume.

        Raises:
            AnalysisError: the subclass names the failed step.
        """

    @abstractmethod
    def analyze_from_url(self, url: str) -> AnalysisResult:
        """Download a PDF resume and score it.

        Raises:
            FetchError: if the download fails; no inference call is made.
            AnalysisError: for any later failure.
        """

    @abstractmethod
    def analyze_file(self, path: Path) -> AnalysisResult:
        """Read a local PDF resume and score it."""
