"""
FastAPI Dependency Injection Configuration.

Provides dependency injection for services and infrastructure components.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from .settings import Settings, get_settings

if TYPE_CHECKING:
    from interview_board.infrastructure.llm.base import BaseChatClient
    from interview_board.infrastructure.storage.base import BaseKeyValueStorage
    from interview_board.services.calendar_layout import CalendarGrid
    from interview_board.services.interview_parser import InterviewParserService
    from interview_board.services.interview_store import InterviewStore


# ============================================
# Infrastructure Dependencies
# ============================================

_storage_instance: "BaseKeyValueStorage | None" = None


def get_storage(
    settings: Settings = Depends(get_settings),
) -> "BaseKeyValueStorage":
    """Get the key-value storage backend (file-based, shared per process)."""
    global _storage_instance
    if _storage_instance is None:
        from interview_board.infrastructure.storage.file import FileKeyValueStorage

        _storage_instance = FileKeyValueStorage(storage_dir=settings.storage_dir)
    return _storage_instance


_chat_client_instance: "BaseChatClient | None" = None


def get_chat_client(
    settings: Settings = Depends(get_settings),
) -> "BaseChatClient":
    """Get the chat completion client (one pooled httpx client per process)."""
    global _chat_client_instance
    if _chat_client_instance is None:
        from interview_board.infrastructure.llm.chat_completion import ChatCompletionClient

        _chat_client_instance = ChatCompletionClient(timeout=settings.llm_timeout)
    return _chat_client_instance


# ============================================
# Domain Service Dependencies
# ============================================

# Store singleton: every request sees the same in-memory map
_interview_store_instance: "InterviewStore | None" = None


def get_interview_store(
    settings: Settings = Depends(get_settings),
    storage: "BaseKeyValueStorage" = Depends(get_storage),
) -> "InterviewStore":
    """Get the interview record store.

    Built once on first use; demo records are seeded when enabled.
    """
    global _interview_store_instance
    if _interview_store_instance is not None:
        return _interview_store_instance

    from interview_board.services.interview_store import DEMO_INTERVIEWS, InterviewStore

    store = InterviewStore(storage=storage, storage_key=settings.storage_key)
    if settings.seed_demo_data:
        store.seed(DEMO_INTERVIEWS)

    _interview_store_instance = store
    return _interview_store_instance


def get_calendar_grid(
    settings: Settings = Depends(get_settings),
) -> "CalendarGrid":
    """Get the weekly grid geometry."""
    from interview_board.services.calendar_layout import CalendarGrid

    return CalendarGrid(
        view_start_hour=settings.calendar_view_start_hour,
        hour_height=settings.calendar_hour_height,
        min_event_height=settings.calendar_min_event_height,
        slot_count=settings.calendar_slot_count,
    )


def get_interview_parser(
    settings: Settings = Depends(get_settings),
    client: "BaseChatClient" = Depends(get_chat_client),
) -> "InterviewParserService":
    """Get the interview text parser."""
    from interview_board.infrastructure.llm.providers import build_provider_configs
    from interview_board.services.interview_parser import InterviewParserService

    return InterviewParserService(client=client, providers=build_provider_configs(settings))


async def close_resources() -> None:
    """Release process-wide resources on shutdown."""
    global _chat_client_instance
    if _chat_client_instance is not None:
        await _chat_client_instance.aclose()
        _chat_client_instance = None


def reset_instances() -> None:
    """Drop cached singletons (used by tests)."""
    global _storage_instance, _chat_client_instance, _interview_store_instance
    _storage_instance = None
    _chat_client_instance = None
    _interview_store_instance = None
