from fastapi import Depends, Request

from adreview.analysis.base import BaseAnalysisService
from adreview.api.responses import ResponseShaper
from adreview.config.settings import Settings
from adreview.pdf.base import BasePdfExtractor
from adreview.pipeline.crm_pipeline import CrmPipeline
from adreview.pipeline.qc_pipeline import QcPipeline


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_analysis_service(request: Request) -> BaseAnalysisService:
    return request.app.state.analysis_service


def get_pdf_extractor(request: Request) -> BasePdfExtractor:
    return request.app.state.pdf_extractor


def get_response_shaper(request: Request) -> ResponseShaper:
    return request.app.state.response_shaper


def get_qc_pipeline(
    analysis_service: BaseAnalysisService = Depends(get_analysis_service),
    pdf_extractor: BasePdfExtractor = Depends(get_pdf_extractor),
) -> QcPipeline:
    return QcPipeline(analysis_service, pdf_extractor)


def get_crm_pipeline(
    analysis_service: BaseAnalysisService = Depends(get_analysis_service),
) -> CrmPipeline:
    return CrmPipeline(analysis_service)
