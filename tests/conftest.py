import json

import httpx
import pytest
from fastapi.testclient import TestClient

from interview_board.config.dependencies import (
    get_interview_parser,
    get_interview_store,
    reset_instances,
)
from interview_board.config.settings import Settings, get_settings
from interview_board.domain.interview.entities import InterviewRecord
from interview_board.infrastructure.llm.chat_completion import ChatCompletionClient
from interview_board.infrastructure.llm.providers import build_provider_configs
from interview_board.infrastructure.storage.memory import InMemoryKeyValueStorage
from interview_board.main import app
from interview_board.services.interview_parser import InterviewParserService
from interview_board.services.interview_store import InterviewStore


def make_record(interview_id: str = "1", **overrides) -> InterviewRecord:
    data = {
        "id": interview_id,
        "companyName": "Tencent",
        "position": "Full-stack Engineer",
        "date": "2025-03-11",
        "startTime": "14:00",
        "duration": "1.5h",
        "location": "Shenzhen",
        "status": "Scheduled",
        "notes": "Prepare Node.js topics",
        "color": "#3b82f6",
    }
    data.update(overrides)
    return InterviewRecord(**data)


def completion_body(content: str) -> dict:
    """Minimal OpenAI-compatible chat completion body."""
    return {
        "id": "chatcmpl-test",
        "model": "deepseek-chat",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


class ProviderStub:
    """Records provider requests and replays a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json=completion_body("{}"))
        self.error: Exception | None = None

    def reply_content(self, content: str) -> None:
        self.response = httpx.Response(200, json=completion_body(content))

    def reply_fields(self, **fields) -> None:
        self.reply_content(json.dumps(fields))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        storage_dir="/nonexistent",
        doubao_api_key=None,
        doubao_model_id=None,
        deepseek_api_key=None,
        deepseek_model_id=None,
    )


@pytest.fixture
def storage():
    return InMemoryKeyValueStorage()


@pytest.fixture
def store(storage):
    return InterviewStore(storage=storage)


@pytest.fixture
def provider_stub():
    return ProviderStub()


@pytest.fixture
def parser(provider_stub, test_settings):
    client = ChatCompletionClient(transport=httpx.MockTransport(provider_stub.handler))
    return InterviewParserService(client=client, providers=build_provider_configs(test_settings))


@pytest.fixture
def client(store, parser, test_settings):
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_interview_store] = lambda: store
    app.dependency_overrides[get_interview_parser] = lambda: parser
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        reset_instances()
