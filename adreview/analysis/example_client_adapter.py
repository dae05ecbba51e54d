"""Offline analysis client.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalysisServiceFactory.
"""

import json
from typing import ClassVar

from adreview.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Returns a fixed passing review for every stage.

    No network calls. Useful for local development and end-to-end tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "overall_status": "PASS",
        "summary": "Example review: creative matches the PRD.",
        "findings": [],
    }

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
        _ = model, temperature, max_tokens, system_prompt, user_prompt
        _ = image_base64, image_media_type
        return json.dumps(self.DEFAULT_RESPONSE)
