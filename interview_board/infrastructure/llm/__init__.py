"""LLM infrastructure - chat completion client and provider table."""

from .base import BaseChatClient, LLMResponse, LLMResponseError
from .chat_completion import ChatCompletionClient
from .providers import (
    ModelProvider,
    ModelSelector,
    ProviderConfig,
    build_provider_configs,
)

__all__ = [
    "BaseChatClient",
    "ChatCompletionClient",
    "LLMResponse",
    "LLMResponseError",
    "ModelProvider",
    "ModelSelector",
    "ProviderConfig",
    "build_provider_configs",
]
