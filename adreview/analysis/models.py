from typing import Any

InitialAnalysis = dict[str, Any]
QCReport = dict[str, Any]
CRMAnalysis = dict[str, Any]

QC_PASS = "PASS"

STAGE_INITIAL_ANALYSIS = "initial_analysis"
STAGE_QC_CHECK = "qc_check"
STAGE_CRM_ANALYSIS = "crm_analysis"


def qc_passed(qc_report: object) -> bool:
    """True only for a JSON object whose ``overall_status`` is PASS.

    Caller-supplied reports are untrusted, so anything else fails the gate.
    """
    return isinstance(qc_report, dict) and qc_report.get("overall_status") == QC_PASS
