from typing import ClassVar

from adreview.config.settings import Settings
from adreview.pdf.base import BasePdfExtractor
from adreview.pdf.pdfplumber_adapter import PdfPlumberAdapter
from adreview.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Picks the PRD text extractor named by ``pdf_engine``."""

    ENGINES: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        PdfPlumberAdapter.name: PdfPlumberAdapter,
        PyMuPdfAdapter.name: PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        extractor_cls = cls.ENGINES.get(engine)
        if extractor_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ENGINES)}"
            )
        return extractor_cls()
