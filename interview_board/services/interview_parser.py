"""
Interview Parser Service (text-extraction gateway)

Sends pasted free text to the selected model provider and maps the JSON it
returns onto the interview form fields.
"""

import logging
from typing import Any

import httpx

from interview_board.domain.interview.entities import (
    DEFAULT_COLOR,
    DEFAULT_DURATION,
    DEFAULT_STATUS,
)
from interview_board.infrastructure.llm.base import BaseChatClient, LLMResponseError
from interview_board.infrastructure.llm.providers import (
    ModelProvider,
    ModelSelector,
    ProviderConfig,
)
from interview_board.parsers.json_parser import parse_json_object
from interview_board.prompts.interview_parser import (
    EXTRACTED_FIELDS,
    get_interview_parser_messages,
)
from interview_board.utils.log_sanitizer import (
    DEFAULT_PREVIEW_LENGTH,
    safe_info,
    sanitize_log_input,
)

logger = logging.getLogger(__name__)

JSON_RESPONSE_FORMAT = {"type": "json_object"}


def fallback_patch() -> dict[str, str]:
    """Patch returned when nothing could be extracted."""
    return {"status": DEFAULT_STATUS.value, "color": DEFAULT_COLOR}


def normalize_extracted_fields(extracted: dict[str, Any]) -> dict[str, str]:
    """
    Map model output onto the form fields.

    Missing or empty fields become "", except duration which defaults to 1h.
    Status and color are always forced to their defaults.
    """
    patch = {}
    for name in EXTRACTED_FIELDS:
        value = extracted.get(name)
        patch[name] = str(value) if value else ""

    if not patch["duration"]:
        patch["duration"] = DEFAULT_DURATION.value

    patch.update(fallback_patch())
    return patch


class InterviewParserService:
    """Text-extraction gateway over an OpenAI-compatible chat client."""

    def __init__(
        self,
        client: BaseChatClient,
        providers: dict[ModelProvider, ProviderConfig],
    ):
        """
        Initialize the parser.

        Args:
            client: Chat completion client used for the round trip
            providers: Connection parameters per provider
        """
        self.client = client
        self.providers = providers

    def provider_config(self, provider: ModelProvider) -> ProviderConfig:
        """Connection parameters for a provider (KeyError when unknown)."""
        return self.providers[provider]

    async def extract(self, text: str, selector: ModelSelector) -> dict[str, str]:
        """
        Extract interview form fields from free text.

        Args:
            text: Pasted free text
            selector: Provider, credentials and optional model id

        Returns:
            Field patch. On any transport or content failure this is only
            ``{"status": "Scheduled", "color": <default>}``; nothing is raised.
        """
        config = self.providers.get(selector.provider)
        if config is None:
            logger.error(f"No provider configured for {selector.provider}")
            return fallback_patch()

        model = config.resolve_model(selector.model_id)
        safe_info(
            logger,
            "Parsing interview text with %s/%s: %s",
            selector.provider.value,
            model,
            sanitize_log_input(text, DEFAULT_PREVIEW_LENGTH),
        )

        try:
            response = await self.client.complete(
                config.url,
                config.headers(selector.api_key or ""),
                model,
                get_interview_parser_messages(text),
                response_format=JSON_RESPONSE_FORMAT,
            )
        except httpx.HTTPError as e:
            logger.error(f"Interview parser request failed: {e}")
            return fallback_patch()
        except LLMResponseError as e:
            logger.error(f"Interview parser got an unusable response: {e}")
            return fallback_patch()

        extracted = parse_json_object(response.content)
        if extracted is None:
            logger.warning("Interview parser response content is not a JSON object")
            return fallback_patch()

        patch = normalize_extracted_fields(extracted)
        logger.info(
            f"Extracted interview fields: "
            f"{sorted(k for k in EXTRACTED_FIELDS if extracted.get(k))}"
        )
        return patch
