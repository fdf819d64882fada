"""
Model Provider Configuration.

Connection parameters for the OpenAI-compatible chat completion providers
the interview parser can call.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from interview_board.config.settings import Settings


class ModelProvider(str, Enum):
    """Supported model providers."""

    DOUBAO = "doubao"
    DEEPSEEK = "deepseek"


def bearer_headers(api_key: str) -> dict[str, str]:
    """Standard bearer-token JSON headers."""
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


@dataclass(frozen=True)
class ProviderConfig:
    """Connection parameters for one provider."""

    url: str
    default_model: str
    requires_model_id: bool
    headers: Callable[[str], dict[str, str]] = bearer_headers

    def resolve_model(self, model_id: str | None) -> str:
        """Model name sent in the request body."""
        if self.requires_model_id:
            return model_id or ""
        return model_id or self.default_model


@dataclass(frozen=True)
class ModelSelector:
    """Which provider to call and with which credentials."""

    provider: ModelProvider
    api_key: str | None = None
    model_id: str | None = None

    def is_configured(self, config: ProviderConfig) -> bool:
        """A key is present and, when the provider needs one, a model id."""
        if not self.api_key:
            return False
        if config.requires_model_id and not self.model_id:
            return False
        return True

    def with_defaults(self, settings: Settings) -> "ModelSelector":
        """Fill missing credentials from server-side settings."""
        if self.provider == ModelProvider.DOUBAO:
            api_key, model_id = settings.doubao_api_key, settings.doubao_model_id
        else:
            api_key, model_id = settings.deepseek_api_key, settings.deepseek_model_id

        return ModelSelector(
            provider=self.provider,
            api_key=self.api_key or api_key,
            model_id=self.model_id or model_id,
        )


def build_provider_configs(settings: Settings) -> dict[ModelProvider, ProviderConfig]:
    """Provider table built from settings."""
    return {
        ModelProvider.DOUBAO: ProviderConfig(
            url=settings.doubao_api_url,
            default_model="",
            requires_model_id=True,
        ),
        ModelProvider.DEEPSEEK: ProviderConfig(
            url=settings.deepseek_api_url,
            default_model="deepseek-chat",
            requires_model_id=False,
        ),
    }
