"""Turns raw provider text into a validated AnalysisResult."""

import json
import math
import re
from typing import Any

from resume_analyzer.analysis.exceptions import MalformedResponseError, SchemaViolationError
from resume_analyzer.analysis.models import AnalysisResult, Improvement

_MIN_SCORE = 0.0
_MAX_SCORE = 100.0
_OPENING_FENCE = re.compile(r"\A```[\w-]*")
_CLOSING_FENCE = re.compile(r"```\Z")


def normalize_response(raw: str) -> AnalysisResult:
    """Strip code fences, parse JSON and validate the analysis contract.

    Raises:
        MalformedResponseError: if the text is not a JSON object.
        SchemaViolationError: if the object does not match the result shape.
    """
    data = parse_json_object(raw)
    return validate_and_build(data)


def strip_code_fences(raw: str) -> str:
    """Remove a leading ```lang fence and a trailing ``` fence, if present."""
    cleaned = _OPENING_FENCE.sub("", raw.strip())
    return _CLOSING_FENCE.sub("", cleaned).strip()


def parse_json_object(raw: str) -> dict[str, Any]:
    cleaned = strip_code_fences(raw)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"Invalid JSON response: {exc}", raw) from exc
    if not isinstance(parsed, dict):
        raise MalformedResponseError("JSON response must be an object", raw)
    return parsed


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate a parsed reply and build an AnalysisResult.

    Raises:
        SchemaViolationError: on any validation failure.
    """
    for key in ("score", "improvements", "strengths"):
        if key not in data:
            raise SchemaViolationError(f"Missing required top-level field: {key}")
    return AnalysisResult(
        score=_build_score(data["score"]),
        improvements=_build_improvements(data["improvements"]),
        strengths=_build_strengths(data["strengths"]),
    )


def _build_score(raw: Any) -> float:
    # bool is an int subclass
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise SchemaViolationError(f"'score' must be a number, got {raw!r}")
    if math.isnan(raw) or not _MIN_SCORE <= raw <= _MAX_SCORE:
        raise SchemaViolationError(
            f"'score' must be between {_MIN_SCORE:g} and {_MAX_SCORE:g}, got {raw!r}"
        )
    return float(raw)


def _build_improvements(raw: Any) -> tuple[Improvement, ...]:
    if not isinstance(raw, list):
        raise SchemaViolationError("'improvements' must be a list")
    return tuple(_build_improvement(item, i) for i, item in enumerate(raw))


def _build_improvement(raw: Any, index: int) -> Improvement:
    if not isinstance(raw, dict):
        raise SchemaViolationError(f"Improvement at index {index} must be an object")
    category = raw.get("category")
    if not isinstance(category, str):
        raise SchemaViolationError(
            f"Improvement at index {index}: 'category' must be a string"
        )
    suggestion = raw.get("suggestion")
    if not isinstance(suggestion, str):
        raise SchemaViolationError(
            f"Improvement at index {index}: 'suggestion' must be a string"
        )
    return Improvement(category=category, suggestion=suggestion)


def _build_strengths(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list):
        raise SchemaViolationError("'strengths' must be a list")
    for i, item in enumerate(raw):
        if not isinstance(item, str):
            raise SchemaViolationError(f"Strength at index {i} must be a string")
    return tuple(raw)
