import io
from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from adreview.analysis.base import BaseAnalysisService
from adreview.api.app import create_app
from adreview.config.settings import Settings
from adreview.pdf.base import BasePdfExtractor

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64

INITIAL_ANALYSIS = {
    "visual_elements": ["logo", "headline"],
    "copy": "Summer sale - 20% off",
    "summary": "Creative matches the PRD",
}
QC_REPORT_PASS = {
    "overall_status": "PASS",
    "checks": [{"name": "logo", "status": "PASS", "details": "present"}],
    "issues": [],
}
CRM_ANALYSIS = {
    "target_segments": ["returning customers"],
    "channels": ["email"],
    "summary": "Send as seasonal promotion",
}


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PRD with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Headline must mention the summer sale")
    c.showPage()
    c.drawString(72, 720, "Logo must appear in the top left corner")
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
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture()
def analysis_service() -> MagicMock:
    """Analysis service double whose stages succeed with canned results."""
    service = MagicMock(spec=BaseAnalysisService)
    service.generate_initial_analysis = AsyncMock(return_value=dict(INITIAL_ANALYSIS))
    service.perform_qc_check = AsyncMock(return_value=dict(QC_REPORT_PASS))
    service.generate_crm_analysis = AsyncMock(return_value=dict(CRM_ANALYSIS))
    return service


@pytest.fixture()
def pdf_extractor() -> MagicMock:
    extractor = MagicMock(spec=BasePdfExtractor)
    extractor.extract.return_value = "PRD: headline must mention the summer sale"
    return extractor


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(analysis_provider="example", log_level="INFO")


@pytest.fixture()
def make_app(
    test_settings: Settings,
    analysis_service: MagicMock,
    pdf_extractor: MagicMock,
) -> Callable[..., FastAPI]:
    def _make(**overrides: object) -> FastAPI:
        settings = overrides.pop("settings", test_settings)
        return create_app(
            settings,  # type: ignore[arg-type]
            analysis_service=overrides.pop("analysis_service", analysis_service),  # type: ignore[arg-type]
            pdf_extractor=overrides.pop("pdf_extractor", pdf_extractor),  # type: ignore[arg-type]
        )

    return _make


@pytest.fixture()
def client(make_app: Callable[..., FastAPI]) -> TestClient:
    return TestClient(make_app())
