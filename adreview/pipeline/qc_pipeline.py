from adreview.analysis.base import BaseAnalysisService
from adreview.analysis.models import STAGE_INITIAL_ANALYSIS, STAGE_QC_CHECK
from adreview.intake.content import convert_image_to_base64, extract_text_from_pdf
from adreview.intake.models import UploadedFile
from adreview.logging.logger import Log
from adreview.pdf.base import BasePdfExtractor
from adreview.pipeline.context import QcPipelineContext


class QcPipeline:
    """Runs the QC review for one validated upload pair.

    Pipeline: encode image -> extract PRD text -> initial analysis -> QC check.
    A failing AI stage stops the run and is recorded on the context together
    with everything computed before it. PDF extraction errors propagate.
    """

    def __init__(
        self,
        analysis_service: BaseAnalysisService,
        pdf_extractor: BasePdfExtractor,
    ) -> None:
        self._analysis_service = analysis_service
        self._pdf_extractor = pdf_extractor

    async def run(self, image: UploadedFile, prd: UploadedFile) -> QcPipelineContext:
        context = QcPipelineContext(image=image, prd=prd)
        Log.info(f"QC review started for image '{image.filename}' and PRD '{prd.filename}'")

        context.image_base64 = convert_image_to_base64(image.content)
        context.prd_text = await extract_text_from_pdf(self._pdf_extractor, prd.content)

        try:
            context.initial_analysis = await self._analysis_service.generate_initial_analysis(
                context.image_base64,
                context.prd_text,
                image_media_type=image.content_type,
            )
        except Exception as exc:
            return self._fail(context, STAGE_INITIAL_ANALYSIS, exc)

        try:
            context.qc_report = await self._analysis_service.perform_qc_check(
                context.initial_analysis,
                context.image_base64,
                context.prd_text,
                image_media_type=image.content_type,
            )
        except Exception as exc:
            return self._fail(context, STAGE_QC_CHECK, exc)

        Log.info(f"QC review finished: {context.qc_report.get('overall_status')}")
        return context

    @staticmethod
    def _fail(context: QcPipelineContext, stage: str, exc: Exception) -> QcPipelineContext:
        context.failed_stage = stage
        context.error_message = str(exc)
        Log.warning(f"QC review failed at stage {stage}: {exc}")
        return context
