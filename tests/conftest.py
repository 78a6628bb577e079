"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from chef_cocina.adapters.in_memory_session_store import InMemorySessionStore
from chef_cocina.config import Settings
from chef_cocina.containers import AppContainer
from chef_cocina.services.chat import ChatClient, ChatService
from chef_cocina.services.history import HistoryService
from chef_cocina.services.recipes import (
    RecipeNotifier,
    RecipeOutputPort,
    RecipeService,
)

RECIPE_REPLY = """¡Perfecto! Te sugiero un delicioso arroz con verduras salteadas 🍚✨

Ingredientes:
🍚 1 taza de arroz
🧅 1 cebolla pequeña
🥕 1 zanahoria
- Salsa de soja al gusto

Pasos:
1. Cuece el arroz en agua con sal durante 15 minutos.
2. Saltea la cebolla y la zanahoria en una sartén.
3. Mezcla todo y añade la salsa de soja.
"""


@dataclass
class FakeChatClient(ChatClient):
    """Fake chat client that records requests and replays a reply."""

    reply: str | None = "¡Hola! ¿Qué te apetece cocinar hoy? 🍳"
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        self.calls.append(
            {
                "model": model,
                "messages": messages,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


@dataclass
class RecordingRecipeOutput(RecipeOutputPort):
    """Recipe channel that keeps every message it receives."""

    messages: list[dict[str, object]] = field(default_factory=list)

    async def send(self, message: dict[str, object]) -> None:
        self.messages.append(message)


class FailingRecipeOutput(RecipeOutputPort):
    """Recipe channel whose delivery always fails."""

    async def send(self, message: dict[str, object]) -> None:
        raise ConnectionError("parent page unreachable")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="openai-key",
        recipe_webhook_url=None,
        environment="test",
    )


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def chat_client() -> FakeChatClient:
    return FakeChatClient()


@pytest.fixture
def recipe_output() -> RecordingRecipeOutput:
    return RecordingRecipeOutput()


@pytest.fixture
def container(
    settings: Settings,
    store: InMemorySessionStore,
    chat_client: FakeChatClient,
    recipe_output: RecordingRecipeOutput,
) -> AppContainer:
    history_service = HistoryService(store)
    chat_service = ChatService(
        history=history_service,
        client=chat_client,
        model=settings.openai_model,
        max_tokens=settings.openai_max_tokens,
        temperature=settings.openai_temperature,
        history_limit=settings.history_limit,
    )
    recipe_service = RecipeService(RecipeNotifier(recipe_output))

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        history_service=history_service,
        chat_service=chat_service,
        recipe_service=recipe_service,
        close_resources=close_resources,
    )
