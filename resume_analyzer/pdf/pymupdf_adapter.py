import pymupdf

from resume_analyzer.pdf.base import BasePdfExtractor, compose_resume_text
from resume_analyzer.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts resume text and hyperlink targets with PyMuPDF.

    ``sort=True`` orders blocks top-to-bottom, left-to-right, which keeps
    two-column resume layouts readable.
    """

    def extract(self, pdf_bytes: bytes) -> str:
        pages: list[str] = []
        links: list[str | None] = []
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                for page in doc:
                    pages.append(page.get_text("text", sort=True))
                    links.extend(link.get("uri") for link in page.get_links())
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return compose_resume_text(pages, links)
