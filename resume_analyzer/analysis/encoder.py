import base64

from resume_analyzer.analysis.exceptions import EncodingError
from resume_analyzer.analysis.models import Document, EncodedPayload


def encode(document: Document) -> EncodedPayload:
    """Encode document bytes as base64 text for transport.

    The whole document must already be in memory; decoding ``data`` yields
    the original bytes exactly.

    Raises:
        EncodingError: if the content is not a bytes-like object.
    """
    try:
        data = base64.b64encode(document.content).decode("ascii")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"Failed to encode document: {exc}") from exc
    return EncodedPayload(
        data=data,
        media_type=document.media_type,
        filename=document.filename,
    )
