import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from resume_analyzer.analysis.models import Document


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a single-page resume PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Jane Doe - Senior Software Engineer")
    c.drawString(72, 700, "Reduced build times by 40% across 12 services")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page resume PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Experience section")
    c.showPage()
    c.drawString(72, 720, "Education section")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def pdf_document(sample_pdf_bytes: bytes) -> Document:
    return Document(
        content=sample_pdf_bytes,
        media_type="application/pdf",
        filename="resume.pdf",
    )


@pytest.fixture()
def linked_pdf_bytes() -> bytes:
    """Generate a resume PDF whose profile links exist only as annotations."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Jane Doe")
    c.drawString(72, 700, "GitHub")
    c.linkURL("https://github.com/janedoe", (72, 695, 150, 712), relative=0)
    c.drawString(72, 680, "LinkedIn")
    c.linkURL("https://www.linkedin.com/in/janedoe", (72, 675, 150, 692), relative=0)
    c.save()
    return buf.getvalue()
