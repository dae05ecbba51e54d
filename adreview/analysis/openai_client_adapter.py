from typing import Any

import httpx
import openai

from adreview.analysis.client_base import BaseAnalysisClient
from adreview.analysis.exceptions import AnalysisNetworkError, AnalysisResponseError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
        image_base64: str | None = None,
        image_media_type: str = "image/png",
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system_prompt},
                    {
                        "role": "user",
                        "content": self._user_content(
                            user_prompt, image_base64, image_media_type
                        ),
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.RateLimitError as exc:
            raise AnalysisNetworkError(f"AI provider quota exceeded: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise AnalysisResponseError("AI returned empty response")
        return content

    @staticmethod
    def _user_content(
        user_prompt: str,
        image_base64: str | None,
        image_media_type: str,
    ) -> list[dict[str, Any]]:
        parts: list[dict[str, Any]] = [{"type": "text", "text": user_prompt}]
        if image_base64:
            parts.append({
                "type": "image_url",
                "image_url": {"url": f"data:{image_media_type};base64,{image_base64}"},
            })
        return parts
