"""
OpenAI-compatible Chat Completion Client.

Implements BaseChatClient over plain httpx for any provider exposing the
``/chat/completions`` request/response shape.
"""

import logging
from typing import Any

import httpx

from .base import BaseChatClient, LLMResponse, LLMResponseError

logger = logging.getLogger(__name__)


class ChatCompletionClient(BaseChatClient):
    """httpx-based chat completion client."""

    def __init__(
        self,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (tests pass a MockTransport).
        """
        self.timeout = timeout
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

        logger.info(f"ChatCompletionClient initialized (timeout={timeout}s)")

    async def complete(
        self,
        url: str,
        headers: dict[str, str],
        model: str,
        messages: list[dict[str, str]],
        *,
        response_format: dict[str, str] | None = None,
    ) -> LLMResponse:
        payload: dict[str, Any] = {
            "model": model,
            "messages": messages,
        }
        if response_format:
            payload["response_format"] = response_format

        response = await self._client.post(url, json=payload, headers=headers)
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as e:
            raise LLMResponseError("Provider returned a non-JSON body") from e

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            raise LLMResponseError("Provider response has no choices")

        message = choices[0].get("message")
        if not isinstance(message, dict) or not isinstance(message.get("content"), str):
            raise LLMResponseError("Provider response has no message content")

        return LLMResponse(
            content=message["content"],
            model=data.get("model", model),
            usage=data.get("usage"),
            raw=data,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
