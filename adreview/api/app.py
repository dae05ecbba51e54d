from fastapi import FastAPI

from adreview.analysis.base import BaseAnalysisService
from adreview.analysis.factory import AnalysisServiceFactory
from adreview.api.errors import register_exception_handlers
from adreview.api.responses import ResponseShaper
from adreview.api.routes import router
from adreview.config.settings import Settings
from adreview.logging.logger import Log
from adreview.pdf.base import BasePdfExtractor
from adreview.pdf.factory import PdfExtractorFactory


def create_app(
    settings: Settings | None = None,
    *,
    analysis_service: BaseAnalysisService | None = None,
    pdf_extractor: BasePdfExtractor | None = None,
) -> FastAPI:
    """Build the API with its collaborators; explicit arguments override settings."""
    settings = settings or Settings()
    Log.configure(settings.log_level)

    app = FastAPI(title="adreview", version="0.1.0")
    app.state.settings = settings
    app.state.analysis_service = analysis_service or AnalysisServiceFactory.create(settings)
    app.state.pdf_extractor = pdf_extractor or PdfExtractorFactory.create(settings)
    app.state.response_shaper = ResponseShaper(
        unify_failure_status_codes=settings.unify_failure_status_codes,
    )
    app.include_router(router)
    register_exception_handlers(app)

    Log.info(
        f"adreview ready (env={settings.app_env}, provider={settings.analysis_provider}, "
        f"pdf_engine={settings.pdf_engine})"
    )
    return app
