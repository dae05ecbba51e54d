import base64

from fastapi.concurrency import run_in_threadpool

from adreview.logging.logger import Log
from adreview.pdf.base import BasePdfExtractor


def convert_image_to_base64(data: bytes) -> str:
    """Encode raw image bytes as an ASCII base64 string."""
    return base64.b64encode(data).decode("ascii")


async def extract_text_from_pdf(extractor: BasePdfExtractor, pdf_bytes: bytes) -> str:
    """Extract PRD text without blocking the event loop.

    Raises:
        PdfExtractionError: if the PRD is malformed or unreadable.
    """
    text = await run_in_threadpool(extractor.extract, pdf_bytes)
    Log.info(f"Extracted {len(text)} chars from PRD ({len(pdf_bytes)} bytes)")
    return text
