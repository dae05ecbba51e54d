from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for provider-specific multimodal AI clients."""

    @abstractmethod
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
        """Return the provider's JSON answer as plain text."""
