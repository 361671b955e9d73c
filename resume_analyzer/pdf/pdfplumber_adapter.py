import io

import pdfplumber

from resume_analyzer.pdf.base import BasePdfExtractor, compose_resume_text
from resume_analyzer.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts resume text and hyperlink targets with pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
                links = [link.get("uri") for page in pdf.pages for link in page.hyperlinks]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return compose_resume_text(pages, links)
