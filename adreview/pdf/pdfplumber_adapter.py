import io

import pdfplumber

from adreview.pdf.base import BasePdfExtractor
from adreview.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Reads PRD text with pdfplumber."""

    name = "pdfplumber"

    def extract(self, pdf_bytes: bytes) -> str:
        if not pdf_bytes:
            raise PdfExtractionError("PRD document is empty")
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as document:
                texts = [page.extract_text() or "" for page in document.pages]
        except Exception as exc:
            raise PdfExtractionError(f"Unable to read PRD with pdfplumber: {exc}") from exc
        return "\n".join(texts).strip()
