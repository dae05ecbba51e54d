import pymupdf

from adreview.pdf.base import BasePdfExtractor
from adreview.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Reads PRD text with PyMuPDF."""

    name = "pymupdf"

    def extract(self, pdf_bytes: bytes) -> str:
        if not pdf_bytes:
            raise PdfExtractionError("PRD document is empty")
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as document:  # type: ignore[no-untyped-call]
                texts = [page.get_text() for page in document]
        except Exception as exc:
            raise PdfExtractionError(f"Unable to read PRD with PyMuPDF: {exc}") from exc
        return "\n".join(texts).strip()
