import base64
from dataclasses import dataclass, field

PDF_MEDIA_TYPE = "application/pdf"
DEFAULT_MAX_DOCUMENT_BYTES = 4 * 1024 * 1024


@dataclass(frozen=True)
class Document:
    """A binary document supplied for analysis."""

    content: bytes
    media_type: str
    filename: str | None = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class EncodedPayload:
    """Base64 transport form of a document."""

    data: str
    media_type: str
    filename: str | None = None

    def as_data_url(self) -> str:
        return f"data:{self.media_type};base64,{self.data}"

    def decode(self) -> bytes:
        return base64.b64decode(self.data, validate=True)


@dataclass(frozen=True)
class AnalysisRequest:
    """Everything sent to the inference provider in one call."""

    prompt: str
    payload: EncodedPayload
    json_schema: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class Improvement:
    """A single suggested change to the resume."""

    category: str
    suggestion: str


@dataclass(frozen=True)
class AnalysisResult:
    """Validated assessment returned to the caller."""

    score: float
    improvements: tuple[Improvement, ...] = ()
    strengths: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "score": self.score,
            "improvements": [
                {"category": i.category, "suggestion": i.suggestion}
                for i in self.improvements
            ],
            "strengths": list(self.strengths),
        }
