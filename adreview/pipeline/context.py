from dataclasses import dataclass

from adreview.analysis.models import CRMAnalysis, InitialAnalysis, QCReport
from adreview.intake.models import UploadedFile


@dataclass(slots=True)
class QcPipelineContext:
    image: UploadedFile
    prd: UploadedFile
    image_base64: str = ""
    prd_text: str = ""
    initial_analysis: InitialAnalysis | None = None
    qc_report: QCReport | None = None
    failed_stage: str = ""
    error_message: str = ""

    @property
    def failed(self) -> bool:
        return bool(self.failed_stage)


@dataclass(slots=True)
class CrmPipelineContext:
    qc_report: object
    initial_analysis: object
    image: UploadedFile | None = None
    gate_passed: bool = False
    crm_analysis: CRMAnalysis | None = None
    failed_stage: str = ""
    error_message: str = ""

    @property
    def failed(self) -> bool:
        return bool(self.failed_stage)
