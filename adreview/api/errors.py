from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adreview.api.responses import ResponseShaper
from adreview.logging.logger import Log
from adreview.pdf.exceptions import PdfExtractionError


def _shaper(request: Request) -> ResponseShaper:
    return request.app.state.response_shaper


async def pdf_extraction_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.error(f"PRD extraction failed for {request.url.path}: {exc}")
    return _shaper(request).extraction_failure(str(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"Unhandled error for {request.method} {request.url.path}: {exc}")
    return _shaper(request).unhandled()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PdfExtractionError, pdf_extraction_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
