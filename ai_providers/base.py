"""
Completion Provider Interface
Strategic Advisor - Completion Providers

A provider turns one prompt (plus an optional system prompt) into one
block of text. Implementations raise ProviderError instead of returning
an empty or partial response.
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any
from dataclasses import dataclass
from enum import Enum


class AIProviderType(Enum):
    """Supported completion providers"""
    OPENROUTER = "openrouter"
    OPENAI = "openai"
    DEEPSEEK = "deepseek"


@dataclass
class AIMessage:
    """One chat turn"""
    role: str  # "system", "user" or "assistant"
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class AIResponse:
    """Completion text and call metadata"""
    content: str
    model: str
    provider: AIProviderType
    usage: Optional[Dict[str, int]] = None  # input_tokens / output_tokens
    finish_reason: Optional[str] = None
    raw_response: Optional[Any] = None

    @property
    def has_content(self) -> bool:
        return isinstance(self.content, str) and bool(self.content.strip())


@dataclass
class AIConfig:
    """Sampling parameters and endpoint for one provider instance"""
    api_key: str
    model: str
    max_tokens: int = 4096
    temperature: float = 0.6
    base_url: Optional[str] = None  # None = provider default endpoint
    timeout: float = 120.0


class BaseAIProvider(ABC):
    """
    Base class for completion providers.

    Subclasses create their client lazily in initialize() and implement
    complete(); complete_prompt() is the single-turn entry point the
    dispatcher uses.
    """

    def __init__(self, config: AIConfig):
        self.config = config
        self._client = None

    @property
    @abstractmethod
    def provider_type(self) -> AIProviderType:
        pass

    @abstractmethod
    async def initialize(self) -> None:
        """Create the API client"""
        pass

    @abstractmethod
    async def complete(
        self,
        messages: List[AIMessage],
        system_prompt: Optional[str] = None,
        **kwargs
    ) -> AIResponse:
        """
        Run one chat completion.

        Args:
            messages: Conversation turns, oldest first
            system_prompt: Prepended as a system turn when given
            **kwargs: Per-call overrides of model, max_tokens, temperature

        Returns:
            AIResponse whose content is non-empty

        Raises:
            ProviderError: If the call fails or the response has no content
        """
        pass

    async def complete_prompt(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        **kwargs
    ) -> AIResponse:
        """Single user-turn completion."""
        return await self.complete(
            [AIMessage(role="user", content=prompt)],
            system_prompt=system_prompt,
            **kwargs
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} model={self.config.model}>"
