"""
AI Providers Package
Strategic Advisor - Completion Providers

Supports OpenAI-compatible chat completion endpoints:
- OpenRouter (default; xiaomi/mimo-v2-flash:free, openai/gpt-4o-mini, ...)
- OpenAI GPT (gpt-4o, gpt-4o-mini, ...)
- DeepSeek (deepseek-chat, deepseek-reasoner)

Usage:
    from ai_providers import create_provider

    provider = create_provider("openrouter", api_key=key)
    response = await provider.complete_prompt(
        "Advise on:\\n\\ndeadlines",
        system_prompt="You are a brutally honest strategic advisor."
    )
    print(response.content)
"""

from .base import (
    BaseAIProvider,
    AIProviderType,
    AIMessage,
    AIResponse,
    AIConfig
)

from .openai_provider import OpenAIProvider, OpenRouterProvider, DeepSeekProvider

from .manager import (
    ProviderInfo,
    PROVIDER_REGISTRY,
    PROVIDER_INFO,
    resolve_provider_type,
    list_providers,
    create_provider,
    create_provider_from_settings,
)

__all__ = [
    # Base classes
    "BaseAIProvider",
    "AIProviderType",
    "AIMessage",
    "AIResponse",
    "AIConfig",

    # Providers
    "OpenAIProvider",
    "OpenRouterProvider",
    "DeepSeekProvider",

    # Registry
    "ProviderInfo",
    "PROVIDER_REGISTRY",
    "PROVIDER_INFO",
    "resolve_provider_type",
    "list_providers",
    "create_provider",
    "create_provider_from_settings",
]

__version__ = "1.0.0"
