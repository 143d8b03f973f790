from __future__ import annotations

from typing import Sequence

import pytest
from fastapi.testclient import TestClient

from lecture_demos.domain.entities import ChatMessage, ChatOptions
from lecture_demos.infrastructure.config import get_settings
from lecture_demos.infrastructure.memory_store import InMemoryForecastStore
from lecture_demos.interface.app import create_app
from lecture_demos.interface.dependencies import get_chat_model


class FakeChatModel:
    """Records every call and answers with a canned reply (or raises)."""

    def __init__(self, reply: str | None = '{"phrases": ["alpha", "beta", "gamma"]}') -> None:
        self.reply = reply
        self.error: Exception | None = None
        self.calls: list[tuple[list[ChatMessage], ChatOptions]] = []

    async def complete(
        self, messages: Sequence[ChatMessage], options: ChatOptions
    ) -> str | None:
        self.calls.append((list(messages), options))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("AI_DEPLOYMENT_URI", "AI_API_KEY", "AI_API_VERSION"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def store() -> InMemoryForecastStore:
    return InMemoryForecastStore()


@pytest.fixture()
def client(store: InMemoryForecastStore) -> TestClient:
    return TestClient(create_app(forecast_store=store))


@pytest.fixture()
def chat_model() -> FakeChatModel:
    return FakeChatModel()


@pytest.fixture()
def chat_client(chat_model: FakeChatModel) -> TestClient:
    app = create_app(forecast_store=InMemoryForecastStore())
    app.dependency_overrides[get_chat_model] = lambda: chat_model
    return TestClient(app)
