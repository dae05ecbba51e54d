from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse

from adreview.analysis.models import qc_passed
from adreview.api.dependencies import (
    get_crm_pipeline,
    get_qc_pipeline,
    get_response_shaper,
    get_settings,
)
from adreview.api.exceptions import RequestParsingError
from adreview.api.responses import ResponseShaper
from adreview.api.uploads import read_analysis_request, read_upload
from adreview.config.settings import Settings
from adreview.intake.validator import validate_files
from adreview.logging.logger import Log
from adreview.pipeline.crm_pipeline import CrmPipeline
from adreview.pipeline.qc_pipeline import QcPipeline

QC_REPORT_FIELD = "qcReport"
INITIAL_ANALYSIS_FIELD = "initialAnalysis"
MISSING_ANALYSIS_INPUTS = "QC report and initial analysis are required"

router = APIRouter(tags=["review"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/qc")
async def run_qc(
    image: UploadFile | None = File(None),
    prd: UploadFile | None = File(None),
    settings: Settings = Depends(get_settings),
    pipeline: QcPipeline = Depends(get_qc_pipeline),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> JSONResponse:
    """Run the initial analysis and QC check for an ad creative and its PRD."""
    image_file = await read_upload(image)
    prd_file = await read_upload(prd)

    errors = validate_files(
        image_file,
        prd_file,
        max_image_size_bytes=settings.max_image_size_bytes,
        max_prd_size_bytes=settings.max_prd_size_bytes,
    )
    if errors or image_file is None or prd_file is None:
        Log.warning(f"QC request rejected: {errors}")
        return shaper.validation_failure(errors)

    context = await pipeline.run(image_file, prd_file)
    if context.failed:
        return shaper.stage_failure(
            context.failed_stage,
            context.error_message,
            context.initial_analysis,
        )
    return shaper.qc_success(context.initial_analysis, context.qc_report)  # type: ignore[arg-type]


@router.post("/analysis")
async def run_crm_analysis(
    request: Request,
    settings: Settings = Depends(get_settings),
    pipeline: CrmPipeline = Depends(get_crm_pipeline),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> JSONResponse:
    """Run the CRM analysis for a creative whose QC report passed."""
    try:
        fields, image_file = await read_analysis_request(
            request, (QC_REPORT_FIELD, INITIAL_ANALYSIS_FIELD)
        )
    except RequestParsingError as exc:
        Log.warning(f"Analysis request rejected: {exc}")
        return shaper.bad_request(str(exc))

    qc_report = fields[QC_REPORT_FIELD]
    initial_analysis = fields[INITIAL_ANALYSIS_FIELD]
    if _is_missing(qc_report) or _is_missing(initial_analysis):
        Log.warning("Analysis request rejected: missing QC report or initial analysis")
        return shaper.bad_request(MISSING_ANALYSIS_INPUTS)

    if not qc_passed(qc_report):
        Log.info("CRM analysis skipped: QC report did not pass")
        return shaper.gate_failure(qc_report)

    errors = validate_files(
        image_file,
        None,
        max_image_size_bytes=settings.max_image_size_bytes,
        max_prd_size_bytes=settings.max_prd_size_bytes,
        image_required=False,
        prd_required=False,
    )
    if errors:
        Log.warning(f"Analysis request rejected: {errors}")
        return shaper.validation_failure(errors)

    context = await pipeline.run(qc_report, initial_analysis, image_file)
    if not context.gate_passed:
        return shaper.gate_failure(qc_report)
    if context.failed:
        return shaper.stage_failure(context.failed_stage, context.error_message)
    return shaper.crm_success(context.crm_analysis)


def _is_missing(value: object) -> bool:
    # Empty objects and lists are supplied values; empty scalars are not.
    if isinstance(value, (dict, list)):
        return False
    return not value
