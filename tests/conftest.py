"""Pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from apps.chat_api.deps import get_credential_storage, get_llm_client
from apps.chat_api.main import app
from ona_connector import MemoryStorage
from ona_llm import LLMClient, LLMResponse


class ScriptedLLM(LLMClient):
    """LLM client that replays a fixed list of responses and records each call."""

    def __init__(self, responses: list[LLMResponse]):
        self.responses = list(responses)
        self.calls: list[dict] = []

    async def create_message(self, messages, tools=None, system_prompt=None, max_tokens=4096, **kwargs):
        self.calls.append(
            {"messages": [dict(m) for m in messages], "tools": tools, "system_prompt": system_prompt}
        )
        return self.responses.pop(0)

    @property
    def model_name(self) -> str:
        return "scripted"


@pytest.fixture
def storage():
    """Empty in-memory credential storage."""
    return MemoryStorage()


@pytest.fixture
def llm():
    """Scripted LLM answering with plain text."""
    return ScriptedLLM(
        [LLMResponse(stop_reason="end_turn", content=[{"type": "text", "text": "Hello!"}])]
    )


@pytest.fixture
def client(storage, llm):
    """FastAPI test client with in-memory storage and a scripted LLM."""
    app.dependency_overrides[get_credential_storage] = lambda: storage
    app.dependency_overrides[get_llm_client] = lambda: llm
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def scripted_llm():
    """Factory for ScriptedLLM instances."""
    return ScriptedLLM
