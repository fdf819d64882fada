"""
Abstract Base Class for Chat Completion Clients.

Defines the interface the interview parser uses to reach a model provider.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class LLMResponse:
    """Response from a chat completion call."""

    content: str
    model: str
    usage: dict[str, int] | None = None
    raw: dict[str, Any] | None = None


class LLMResponseError(Exception):
    """The provider answered, but not with a usable completion."""


class BaseChatClient(ABC):
    """Abstract base class for chat completion clients."""

    @abstractmethod
    async def complete(
        self,
        url: str,
        headers: dict[str, str],
        model: str,
        messages: list[dict[str, str]],
        *,
        response_format: dict[str, str] | None = None,
    ) -> LLMResponse:
        """Run one chat completion round trip.

        Args:
            url: Provider chat completion endpoint.
            headers: Request headers including provider auth.
            model: Model identifier sent in the body.
            messages: List of message dicts with 'role' and 'content' keys.
            response_format: Optional constrained response mode.

        Returns:
            LLMResponse with the first choice's message content.

        Raises:
            httpx.HTTPError: Transport failure or non-2xx status.
            LLMResponseError: Body without a first completion message.
        """
        pass

    async def aclose(self) -> None:
        """Release network resources."""
        return None
