"""Checks on parsed provider answers."""

from typing import Any

from adreview.analysis.exceptions import AnalysisResponseError


def require_qc_status(report: dict[str, Any]) -> dict[str, Any]:
    """Ensure a QC report names its verdict.

    Raises:
        AnalysisResponseError: if ``overall_status`` is missing or not a string.
    """
    status = report.get("overall_status")
    if not isinstance(status, str) or not status.strip():
        raise AnalysisResponseError("QC report is missing 'overall_status'")
    return report
