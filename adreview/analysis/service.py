"""AI-powered creative review stages."""

import json
from pathlib import Path
from typing import Any

from fastapi.concurrency import run_in_threadpool

from adreview.analysis.base import BaseAnalysisService
from adreview.analysis.client_base import BaseAnalysisClient
from adreview.analysis.exceptions import AnalysisResponseError
from adreview.analysis.models import (
    STAGE_CRM_ANALYSIS,
    STAGE_INITIAL_ANALYSIS,
    STAGE_QC_CHECK,
    CRMAnalysis,
    InitialAnalysis,
    QCReport,
)
from adreview.analysis.prompt_loader import SYSTEM_PROMPT_NAME, load_prompt_template
from adreview.analysis.validator import require_qc_status
from adreview.logging.logger import Log


class AnalysisService(BaseAnalysisService):
    """Runs each review stage as one prompt against an AI client."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.2,
        max_tokens: int = 4096,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_tokens = max_tokens
        self._system_prompt = load_prompt_template(SYSTEM_PROMPT_NAME, prompt_dir)
        self._templates = {
            STAGE_INITIAL_ANALYSIS: load_prompt_template("initial_analysis_prompt.txt", prompt_dir),
            STAGE_QC_CHECK: load_prompt_template("qc_check_prompt.txt", prompt_dir),
            STAGE_CRM_ANALYSIS: load_prompt_template("crm_analysis_prompt.txt", prompt_dir),
        }

    async def generate_initial_analysis(
        self,
        image_base64: str,
        prd_text: str,
        *,
        image_media_type: str = "image/png",
    ) -> InitialAnalysis:
        prompt = self._templates[STAGE_INITIAL_ANALYSIS].format(prd_text=prd_text)
        return await self._run_stage(
            STAGE_INITIAL_ANALYSIS, prompt, image_base64, image_media_type
        )

    async def perform_qc_check(
        self,
        initial_analysis: InitialAnalysis,
        image_base64: str,
        prd_text: str,
        *,
        image_media_type: str = "image/png",
    ) -> QCReport:
        prompt = self._templates[STAGE_QC_CHECK].format(
            initial_analysis=_dump(initial_analysis),
            prd_text=prd_text,
        )
        report = await self._run_stage(STAGE_QC_CHECK, prompt, image_base64, image_media_type)
        require_qc_status(report)
        Log.info(f"QC check verdict: {report['overall_status']}")
        return report

    async def generate_crm_analysis(
        self,
        qc_report: QCReport,
        initial_analysis: InitialAnalysis,
        image_base64: str | None = None,
        *,
        image_media_type: str = "image/png",
    ) -> CRMAnalysis:
        prompt = self._templates[STAGE_CRM_ANALYSIS].format(
            initial_analysis=_dump(initial_analysis),
            qc_report=_dump(qc_report),
        )
        return await self._run_stage(
            STAGE_CRM_ANALYSIS, prompt, image_base64, image_media_type
        )

    async def _run_stage(
        self,
        stage: str,
        prompt: str,
        image_base64: str | None,
        image_media_type: str,
    ) -> dict[str, Any]:
        Log.debug(f"{stage} prompt:\n{prompt}")
        raw_response = await run_in_threadpool(
            self._call_ai, prompt, image_base64, image_media_type
        )
        Log.debug(f"{stage} raw response:\n{raw_response}")
        result = self._parse_json(raw_response)
        Log.info(f"Stage {stage} complete: {len(result)} top-level fields")
        return result

    def _call_ai(self, prompt: str, image_base64: str | None, image_media_type: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            image_base64=image_base64,
            image_media_type=image_media_type,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, Any]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AnalysisResponseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise AnalysisResponseError("JSON response must be an object")
        return parsed


def _dump(value: object) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)
