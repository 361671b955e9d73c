from resume_analyzer.pdf.base import BasePdfExtractor
from resume_analyzer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from resume_analyzer.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates a PDF text extractor by engine name."""

    ENGINES: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, engine: str) -> BasePdfExtractor:
        engine_cls = cls.ENGINES.get(engine.strip().lower())
        if engine_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        return engine_cls()
