import json
from datetime import datetime, timedelta, timezone

from adreview.api.responses import ResponseShaper, utc_timestamp


def _body(response) -> dict:  # type: ignore[no-untyped-def, type-arg]
    return json.loads(response.body)


class TestUtcTimestamp:
    def test_is_iso_8601_utc(self) -> None:
        stamp = utc_timestamp()
        assert stamp.endswith("Z")
        parsed = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
        assert parsed.tzinfo is not None
        assert abs(datetime.now(timezone.utc) - parsed) < timedelta(seconds=5)

    def test_has_millisecond_precision(self) -> None:
        assert len(utc_timestamp().split(".")[1]) == len("000Z")


class TestResponseShaper:
    def test_validation_failure(self) -> None:
        response = ResponseShaper().validation_failure(["Image file is required"])
        assert response.status_code == 400
        assert _body(response) == {"status": "FAIL", "errors": ["Image file is required"]}

    def test_stage_failure_without_partial_results(self) -> None:
        response = ResponseShaper().stage_failure("initial_analysis", "timeout")
        assert response.status_code == 200
        assert _body(response) == {
            "status": "FAIL",
            "stage": "initial_analysis",
            "error": "timeout",
        }

    def test_stage_failure_with_initial_analysis(self) -> None:
        response = ResponseShaper().stage_failure("qc_check", "bad", {"summary": "x"})
        assert _body(response)["initial_analysis"] == {"summary": "x"}

    def test_gate_failure(self) -> None:
        response = ResponseShaper().gate_failure({"overall_status": "FAIL"})
        assert response.status_code == 200
        assert _body(response) == {
            "status": "FAIL",
            "reason": "QC check did not pass",
            "qc_report": {"overall_status": "FAIL"},
        }

    def test_qc_success_uses_report_status(self) -> None:
        response = ResponseShaper().qc_success({"a": 1}, {"overall_status": "FAIL"})
        body = _body(response)
        assert response.status_code == 200
        assert body["status"] == "FAIL"
        assert body["analysis"] == {"initial": {"a": 1}, "qc": {"overall_status": "FAIL"}}
        assert "timestamp" in body

    def test_crm_success(self) -> None:
        body = _body(ResponseShaper().crm_success({"channels": ["email"]}))
        assert body["status"] == "SUCCESS"
        assert body["analysis"] == {"crm": {"channels": ["email"]}}

    def test_unified_status_codes(self) -> None:
        shaper = ResponseShaper(unify_failure_status_codes=True)
        assert shaper.stage_failure("qc_check", "x").status_code == 502
        assert shaper.gate_failure({}).status_code == 422
        assert shaper.validation_failure([]).status_code == 400
