from abc import ABC, abstractmethod

from adreview.analysis.models import CRMAnalysis, InitialAnalysis, QCReport


class BaseAnalysisService(ABC):
    """Contract for the three AI review stages.

    Every stage is one round trip to the provider and raises
    ``AnalysisError`` on failure. Stages never retry.
    """

    @abstractmethod
    async def generate_initial_analysis(
        self,
        image_base64: str,
        prd_text: str,
        *,
        image_media_type: str = "image/png",
    ) -> InitialAnalysis:
        """Describe the creative and map it to the PRD requirements."""

    @abstractmethod
    async def perform_qc_check(
        self,
        initial_analysis: InitialAnalysis,
        image_base64: str,
        prd_text: str,
        *,
        image_media_type: str = "image/png",
    ) -> QCReport:
        """Judge the creative; the report always carries ``overall_status``."""

    @abstractmethod
    async def generate_crm_analysis(
        self,
        qc_report: QCReport,
        initial_analysis: InitialAnalysis,
        image_base64: str | None = None,
        *,
        image_media_type: str = "image/png",
    ) -> CRMAnalysis:
        """Produce CRM recommendations for a creative that passed QC."""
