from abc import ABC, abstractmethod
from collections.abc import Iterable


class BasePdfExtractor(ABC):
    """Contract for PDF text extraction engines."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract resume text from PDF bytes.

        Pages are separated by a blank line; pages without text are skipped.
        Hyperlink targets (profile, portfolio, repository URLs) are not part
        of the page text, so they are appended under a "Links:" heading.

        Raises:
            PdfExtractionError: if the bytes cannot be parsed as a PDF.
        """


def compose_resume_text(pages: Iterable[str], links: Iterable[str | None] = ()) -> str:
    text = "\n\n".join(p.strip() for p in pages if p and p.strip())
    unique_links = list(dict.fromkeys(link.strip() for link in links if link and link.strip()))
    if not unique_links:
        return text
    link_block = "Links:\n" + "\n".join(unique_links)
    return f"{text}\n\n{link_block}" if text else link_block
