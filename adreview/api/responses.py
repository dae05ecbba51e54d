"""JSON envelopes returned by the review endpoints."""

from datetime import datetime, timezone
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

STATUS_FAIL = "FAIL"
STATUS_SUCCESS = "SUCCESS"
QC_NOT_PASSED_REASON = "QC check did not pass"

HTTP_422_UNPROCESSABLE = 422


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-05-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResponseShaper:
    """Builds every response body the endpoints emit.

    Stage and gate failures are reported with HTTP 200 and ``status: FAIL``
    for compatibility with existing callers. With
    ``unify_failure_status_codes`` they get non-2xx codes instead.
    """

    def __init__(self, *, unify_failure_status_codes: bool = False) -> None:
        self._unify = unify_failure_status_codes

    def validation_failure(self, errors: list[str]) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"status": STATUS_FAIL, "errors": errors},
        )

    def bad_request(self, error: str) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"status": STATUS_FAIL, "error": error},
        )

    def stage_failure(
        self,
        stage: str,
        error: str,
        initial_analysis: Any = None,
    ) -> JSONResponse:
        content: dict[str, Any] = {"status": STATUS_FAIL, "stage": stage}
        if initial_analysis is not None:
            content["initial_analysis"] = initial_analysis
        content["error"] = error
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY if self._unify else status.HTTP_200_OK,
            content=content,
        )

    def gate_failure(self, qc_report: Any) -> JSONResponse:
        return JSONResponse(
            status_code=(
                HTTP_422_UNPROCESSABLE if self._unify else status.HTTP_200_OK
            ),
            content={
                "status": STATUS_FAIL,
                "reason": QC_NOT_PASSED_REASON,
                "qc_report": qc_report,
            },
        )

    def qc_success(self, initial_analysis: Any, qc_report: dict[str, Any]) -> JSONResponse:
        return JSONResponse(
            content={
                "status": qc_report.get("overall_status"),
                "timestamp": utc_timestamp(),
                "analysis": {"initial": initial_analysis, "qc": qc_report},
            }
        )

    def crm_success(self, crm_analysis: Any) -> JSONResponse:
        return JSONResponse(
            content={
                "status": STATUS_SUCCESS,
                "timestamp": utc_timestamp(),
                "analysis": {"crm": crm_analysis},
            }
        )

    def extraction_failure(self, error: str) -> JSONResponse:
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE,
            content={"status": STATUS_FAIL, "error": error},
        )

    def unhandled(self) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": STATUS_FAIL, "error": "Internal server error"},
        )
