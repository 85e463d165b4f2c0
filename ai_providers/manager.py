"""
AI Provider Registry
Strategic Advisor - Completion Providers

Maps provider names to implementations and builds the configured provider.
"""

from typing import Optional, Dict, List, Type
from dataclasses import dataclass

from .base import BaseAIProvider, AIProviderType, AIConfig
from .openai_provider import OpenAIProvider, OpenRouterProvider, DeepSeekProvider


@dataclass
class ProviderInfo:
    """Information about a completion provider"""
    type: AIProviderType
    name: str
    description: str
    models: Dict[str, str]
    default_model: str
    env_key: str  # Environment variable name for API key


# Registry of all available providers
PROVIDER_REGISTRY: Dict[AIProviderType, Type[BaseAIProvider]] = {
    AIProviderType.OPENROUTER: OpenRouterProvider,
    AIProviderType.OPENAI: OpenAIProvider,
    AIProviderType.DEEPSEEK: DeepSeekProvider,
}

PROVIDER_INFO: Dict[AIProviderType, ProviderInfo] = {
    AIProviderType.OPENROUTER: ProviderInfo(
        type=AIProviderType.OPENROUTER,
        name="OpenRouter",
        description="OpenAI-compatible gateway to many hosted models",
        models=OpenRouterProvider.MODELS,
        default_model=OpenRouterProvider.DEFAULT_MODEL,
        env_key="OPENROUTER_API_KEY"
    ),
    AIProviderType.OPENAI: ProviderInfo(
        type=AIProviderType.OPENAI,
        name="OpenAI GPT",
        description="GPT-4o family",
        models=OpenAIProvider.MODELS,
        default_model=OpenAIProvider.DEFAULT_MODEL,
        env_key="OPENAI_API_KEY"
    ),
    AIProviderType.DEEPSEEK: ProviderInfo(
        type=AIProviderType.DEEPSEEK,
        name="DeepSeek",
        description="DeepSeek V3 - Cost-effective, OpenAI-compatible",
        models=DeepSeekProvider.MODELS,
        default_model=DeepSeekProvider.DEFAULT_MODEL,
        env_key="DEEPSEEK_API_KEY"
    ),
}

_PROVIDER_ALIASES = {
    "openrouter": AIProviderType.OPENROUTER,
    "openai": AIProviderType.OPENAI,
    "gpt": AIProviderType.OPENAI,
    "deepseek": AIProviderType.DEEPSEEK,
}


def resolve_provider_type(name: str) -> AIProviderType:
    """Provider name (case-insensitive) -> AIProviderType"""
    ptype = _PROVIDER_ALIASES.get((name or "").lower())
    if ptype is None:
        raise ValueError(f"Unknown provider: {name}")
    return ptype


def list_providers() -> List[ProviderInfo]:
    return list(PROVIDER_INFO.values())


def create_provider(
    provider: str,
    api_key: str,
    model: Optional[str] = None,
    base_url: Optional[str] = None,
    temperature: float = 0.6,
    max_tokens: int = 4096,
    timeout: float = 120.0,
) -> BaseAIProvider:
    """
    Factory function to create a completion provider.

    Args:
        provider: "openrouter", "openai" or "deepseek"
        api_key: API key for the provider
        model: Model id (provider default if None)
        base_url: Override endpoint

    Returns:
        Uninitialized provider (the client is created on first use)
    """
    ptype = resolve_provider_type(provider)
    info = PROVIDER_INFO[ptype]

    config = AIConfig(
        api_key=api_key,
        model=model or info.default_model,
        max_tokens=max_tokens,
        temperature=temperature,
        base_url=base_url,
        timeout=timeout,
    )
    return PROVIDER_REGISTRY[ptype](config)


def create_provider_from_settings(settings) -> BaseAIProvider:
    """Build the provider described by config.settings.Settings."""
    return create_provider(
        provider=settings.provider,
        api_key=settings.get_api_key(),
        model=settings.model,
        base_url=settings.provider_base_url,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        timeout=settings.request_timeout,
    )
