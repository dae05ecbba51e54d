"""Tests for AnalysisService (AI review stages)."""

import asyncio
import json
from unittest.mock import MagicMock, patch

import pytest

from adreview.analysis.exceptions import (
    AnalysisError,
    AnalysisNetworkError,
    AnalysisResponseError,
)
from adreview.analysis.service import AnalysisService


def _make_service(client: MagicMock | None = None, **kwargs: object) -> AnalysisService:
    if client is None:
        client = MagicMock()
    return AnalysisService(client=client, model="test-model", **kwargs)  # type: ignore[arg-type]


def _client_returning(payload: object) -> MagicMock:
    client = MagicMock()
    client.create_chat_completion.return_value = (
        payload if isinstance(payload, str) else json.dumps(payload)
    )
    return client


class TestInitialAnalysis:
    def test_returns_parsed_object(self) -> None:
        client = _client_returning({"summary": "ok"})
        result = asyncio.run(_make_service(client).generate_initial_analysis("aW1n", "prd text"))
        assert result == {"summary": "ok"}

    def test_sends_prd_text_and_image(self) -> None:
        client = _client_returning({"summary": "ok"})
        asyncio.run(
            _make_service(client).generate_initial_analysis(
                "aW1n", "Logo top left", image_media_type="image/jpeg"
            )
        )
        kwargs = client.create_chat_completion.call_args.kwargs
        assert "Logo top left" in kwargs["user_prompt"]
        assert kwargs["image_base64"] == "aW1n"
        assert kwargs["image_media_type"] == "image/jpeg"
        assert kwargs["model"] == "test-model"

    def test_prd_text_with_braces_is_kept_verbatim(self) -> None:
        client = _client_returning({})
        asyncio.run(_make_service(client).generate_initial_analysis("aW1n", "use {brand}"))
        assert "use {brand}" in client.create_chat_completion.call_args.kwargs["user_prompt"]


class TestQcCheck:
    def test_includes_initial_analysis_in_prompt(self) -> None:
        client = _client_returning({"overall_status": "PASS"})
        asyncio.run(
            _make_service(client).perform_qc_check({"summary": "red banner"}, "aW1n", "prd")
        )
        assert "red banner" in client.create_chat_completion.call_args.kwargs["user_prompt"]

    def test_returns_report(self) -> None:
        client = _client_returning({"overall_status": "FAIL", "issues": ["typo"]})
        report = asyncio.run(_make_service(client).perform_qc_check({}, "aW1n", "prd"))
        assert report == {"overall_status": "FAIL", "issues": ["typo"]}

    def test_report_without_status_is_rejected(self) -> None:
        client = _client_returning({"issues": []})
        with pytest.raises(AnalysisResponseError, match="overall_status"):
            asyncio.run(_make_service(client).perform_qc_check({}, "aW1n", "prd"))


class TestCrmAnalysis:
    def test_includes_qc_report_in_prompt(self) -> None:
        client = _client_returning({"channels": ["email"]})
        result = asyncio.run(
            _make_service(client).generate_crm_analysis(
                {"overall_status": "PASS", "summary": "clean"}, {"summary": "banner"}
            )
        )
        assert result == {"channels": ["email"]}
        kwargs = client.create_chat_completion.call_args.kwargs
        assert "clean" in kwargs["user_prompt"]
        assert "banner" in kwargs["user_prompt"]

    def test_image_is_optional(self) -> None:
        client = _client_returning({})
        asyncio.run(
            _make_service(client).generate_crm_analysis({"overall_status": "PASS"}, {"a": 1})
        )
        assert client.create_chat_completion.call_args.kwargs["image_base64"] is None


class TestTemperature:
    def test_passes_temperature_in_range(self) -> None:
        client = _client_returning({})
        asyncio.run(_make_service(client, temperature=0.4).generate_initial_analysis("i", "p"))
        assert client.create_chat_completion.call_args.kwargs["temperature"] == 0.4

    def test_clamps_temperature(self) -> None:
        client = _client_returning({})
        asyncio.run(_make_service(client, temperature=3.0).generate_initial_analysis("i", "p"))
        assert client.create_chat_completion.call_args.kwargs["temperature"] == 1.0


class TestJsonParsing:
    def test_strips_markdown_code_fences(self) -> None:
        client = _client_returning('```json\n{"summary": "ok"}\n```')
        result = asyncio.run(_make_service(client).generate_initial_analysis("i", "p"))
        assert result == {"summary": "ok"}

    def test_invalid_json_raises_error(self) -> None:
        client = _client_returning("not valid json")
        with pytest.raises(AnalysisResponseError, match="Invalid JSON"):
            asyncio.run(_make_service(client).generate_initial_analysis("i", "p"))

    def test_json_array_raises_error(self) -> None:
        client = _client_returning("[]")
        with pytest.raises(AnalysisResponseError, match="must be an object"):
            asyncio.run(_make_service(client).generate_initial_analysis("i", "p"))


class TestProviderErrors:
    def test_network_error_propagates(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = AnalysisNetworkError("network timeout")
        with pytest.raises(AnalysisNetworkError, match="network timeout"):
            asyncio.run(_make_service(client).generate_initial_analysis("i", "p"))

    def test_missing_prompt_dir_raises(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(AnalysisError, match="Failed to load prompt"):
            _make_service(prompt_dir=tmp_path)


class TestDebugLogging:
    def test_logs_prompt_in_debug(self) -> None:
        client = _client_returning({})
        service = _make_service(client)
        with patch("adreview.analysis.service.Log") as mock_log:
            asyncio.run(service.generate_initial_analysis("i", "PRD body"))
        first_debug = mock_log.debug.call_args_list[0].args[0]
        assert "prompt" in first_debug
        assert "PRD body" in first_debug

    def test_logs_qc_verdict(self) -> None:
        client = _client_returning({"overall_status": "PASS"})
        service = _make_service(client)
        with patch("adreview.analysis.service.Log") as mock_log:
            asyncio.run(service.perform_qc_check({}, "i", "p"))
        assert any("PASS" in c.args[0] for c in mock_log.info.call_args_list)
