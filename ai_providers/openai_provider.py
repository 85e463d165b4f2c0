"""
OpenAI-compatible Providers - OpenAI, OpenRouter, DeepSeek
Strategic Advisor - Completion Providers

All three speak the OpenAI chat completions format; they differ only in
endpoint and default model.
"""

from typing import Optional, List, Dict, Any

from openai import AsyncOpenAI, OpenAIError

from config.logging_config import get_logger
from core.errors import ProviderError

from .base import (
    BaseAIProvider,
    AIProviderType,
    AIMessage,
    AIResponse,
    AIConfig
)

logger = get_logger(__name__)


class OpenAIProvider(BaseAIProvider):
    """
    OpenAI GPT Provider

    Every response is validated: a missing choice or empty message content
    is a ProviderError, never an empty success.
    """

    MODELS = {
        "gpt-4o": "GPT-4o (Latest, Multimodal)",
        "gpt-4o-mini": "GPT-4o Mini (Fast)",
        "gpt-4-turbo": "GPT-4 Turbo",
    }

    DEFAULT_MODEL = "gpt-4o-mini"
    BASE_URL: Optional[str] = None  # SDK default
    EXTRA_HEADERS: Dict[str, str] = {}

    @property
    def provider_type(self) -> AIProviderType:
        return AIProviderType.OPENAI

    async def initialize(self) -> None:
        """Initialize the async client"""
        self._client = AsyncOpenAI(
            api_key=self.config.api_key,
            base_url=self.config.base_url or self.BASE_URL,
            timeout=self.config.timeout,
            max_retries=0,  # one attempt per request
            default_headers=self.EXTRA_HEADERS or None,
        )

    def _convert_messages(
        self,
        messages: List[AIMessage],
        system_prompt: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Convert AIMessage to OpenAI format"""
        converted = []

        if system_prompt:
            converted.append({"role": "system", "content": system_prompt})

        converted.extend(msg.to_dict() for msg in messages)

        return converted

    async def complete(
        self,
        messages: List[AIMessage],
        system_prompt: Optional[str] = None,
        **kwargs
    ) -> AIResponse:
        """Generate completion"""
        if not self._client:
            await self.initialize()

        api_messages = self._convert_messages(messages, system_prompt)
        model = kwargs.get("model", self.config.model)

        try:
            response = await self._client.chat.completions.create(
                model=model,
                max_tokens=kwargs.get("max_tokens", self.config.max_tokens),
                temperature=kwargs.get("temperature", self.config.temperature),
                messages=api_messages
            )
        except OpenAIError as e:
            logger.error(f"{self.provider_type.value} completion failed ({model}): {e}")
            raise ProviderError(f"Completion request failed: {e}") from e

        choices = getattr(response, "choices", None)
        if not choices:
            raise ProviderError("Malformed completion response: no choices returned")

        choice = choices[0]
        message = getattr(choice, "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise ProviderError("Completion response contained no content")

        usage = getattr(response, "usage", None)
        return AIResponse(
            content=content,
            model=getattr(response, "model", None) or model,
            provider=self.provider_type,
            usage={
                "input_tokens": usage.prompt_tokens,
                "output_tokens": usage.completion_tokens
            } if usage else None,
            finish_reason=getattr(choice, "finish_reason", None),
            raw_response=response
        )


class OpenRouterProvider(OpenAIProvider):
    """
    OpenRouter - one OpenAI-compatible endpoint in front of many models.
    """

    MODELS = {
        "xiaomi/mimo-v2-flash:free": "MiMo V2 Flash (Free)",
        "openai/gpt-4o-mini": "GPT-4o Mini via OpenRouter",
        "anthropic/claude-3.5-sonnet": "Claude 3.5 Sonnet via OpenRouter",
    }

    DEFAULT_MODEL = "xiaomi/mimo-v2-flash:free"
    BASE_URL = "https://openrouter.ai/api/v1"
    EXTRA_HEADERS = {"X-Title": "Strategic Advisor"}

    @property
    def provider_type(self) -> AIProviderType:
        return AIProviderType.OPENROUTER


class DeepSeekProvider(OpenAIProvider):
    """
    DeepSeek AI Provider (OpenAI-compatible API format).
    """

    MODELS = {
        "deepseek-chat": "DeepSeek Chat (V3)",
        "deepseek-reasoner": "DeepSeek Reasoner (R1)",
    }

    DEFAULT_MODEL = "deepseek-chat"
    BASE_URL = "https://api.deepseek.com"

    @property
    def provider_type(self) -> AIProviderType:
        return AIProviderType.DEEPSEEK
