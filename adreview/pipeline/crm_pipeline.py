from adreview.analysis.base import BaseAnalysisService
from adreview.analysis.models import STAGE_CRM_ANALYSIS, qc_passed
from adreview.intake.content import convert_image_to_base64
from adreview.intake.models import UploadedFile
from adreview.logging.logger import Log
from adreview.pipeline.context import CrmPipelineContext


class CrmPipeline:
    """Gates on a caller-supplied QC report, then runs the CRM analysis."""

    def __init__(self, analysis_service: BaseAnalysisService) -> None:
        self._analysis_service = analysis_service

    async def run(
        self,
        qc_report: object,
        initial_analysis: object,
        image: UploadedFile | None = None,
    ) -> CrmPipelineContext:
        context = CrmPipelineContext(
            qc_report=qc_report,
            initial_analysis=initial_analysis,
            image=image,
        )
        context.gate_passed = qc_passed(qc_report)
        if not context.gate_passed:
            Log.info("CRM analysis skipped: QC report did not pass")
            return context

        image_base64 = convert_image_to_base64(image.content) if image is not None else None
        try:
            context.crm_analysis = await self._analysis_service.generate_crm_analysis(
                qc_report,  # type: ignore[arg-type]
                initial_analysis,  # type: ignore[arg-type]
                image_base64,
                image_media_type=image.content_type if image is not None else "image/png",
            )
        except Exception as exc:
            context.failed_stage = STAGE_CRM_ANALYSIS
            context.error_message = str(exc)
            Log.warning(f"CRM analysis failed: {exc}")
            return context

        Log.info("CRM analysis finished")
        return context
