"""Offline inference client.

Use this module as a reference when implementing new provider adapters:
implement BaseInferenceClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from resume_analyzer.analysis.client_base import BaseInferenceClient
from resume_analyzer.analysis.models import AnalysisRequest, AnalysisResult, Improvement


class ExampleClientAdapter(BaseInferenceClient):
    """Returns a fixed, schema-conforming analysis without network calls."""

    DEFAULT_RESULT: ClassVar[AnalysisResult] = AnalysisResult(
        score=75,
        improvements=(
            Improvement(
                category="Achievements",
                suggestion="Quantify results with metrics such as revenue, time saved or team size.",
            ),
            Improvement(
                category="Formatting",
                suggestion="Use standard section headings so ATS parsers can read the resume.",
            ),
        ),
        strengths=(
            "Clear professional summary",
            "Relevant technical skills",
            "Consistent layout",
        ),
    )

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        request: AnalysisRequest,
    ) -> str:
        _ = model, temperature, request
        return json.dumps(self.DEFAULT_RESULT.to_dict())
