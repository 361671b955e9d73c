import json
from functools import lru_cache
from pathlib import Path

from resume_analyzer.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the analysis prompt text from a file.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled analysis_prompt.txt.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise AnalysisError(f"Failed to load prompt template: {exc}") from exc


def load_response_schema(path: Path | None = None) -> dict[str, object]:
    """Load the JSON schema the provider must satisfy.

    Args:
        path: Path to the JSON schema file.
              Defaults to the bundled analysis_schema.json.

    Raises:
        AnalysisError: if the file cannot be read or is not a JSON object.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_schema.json"
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load JSON schema: {exc}") from exc
    try:
        schema = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise AnalysisError(f"Invalid JSON schema in {path}: {exc}") from exc
    if not isinstance(schema, dict):
        raise AnalysisError(f"JSON schema in {path} must be an object")
    return schema


@lru_cache(maxsize=1)
def compose_prompt() -> str:
    """Return the bundled analysis prompt. Identical on every call."""
    return load_prompt_template()
