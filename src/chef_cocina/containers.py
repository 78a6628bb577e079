"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from chef_cocina.adapters.in_memory_session_store import InMemorySessionStore
from chef_cocina.adapters.openai_chat_client import OpenAIChatClient
from chef_cocina.adapters.recipe_webhook_client import (
    HttpxRecipeWebhook,
    LoggingRecipeOutput,
)
from chef_cocina.config import Settings, has_openai_credentials
from chef_cocina.services.chat import ChatService
from chef_cocina.services.history import HistoryService
from chef_cocina.services.recipes import (
    RecipeNotifier,
    RecipeOutputPort,
    RecipeService,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    history_service: HistoryService
    chat_service: ChatService
    recipe_service: RecipeService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    history_service = HistoryService(InMemorySessionStore())

    chat_client: OpenAIChatClient | None = None
    if has_openai_credentials(resolved_settings.openai_api_key):
        chat_client = OpenAIChatClient.create(resolved_settings.openai_api_key)
    chat_service = ChatService(
        history=history_service,
        client=chat_client,
        model=resolved_settings.openai_model,
        max_tokens=resolved_settings.openai_max_tokens,
        temperature=resolved_settings.openai_temperature,
        history_limit=resolved_settings.history_limit,
    )

    webhook: HttpxRecipeWebhook | None = None
    recipe_port: RecipeOutputPort = LoggingRecipeOutput()
    if resolved_settings.recipe_webhook_url:
        webhook = HttpxRecipeWebhook.create(resolved_settings.recipe_webhook_url)
        recipe_port = webhook
    recipe_service = RecipeService(RecipeNotifier(recipe_port))

    async def close_resources() -> None:
        if chat_client is not None:
            await chat_client.close()
        if webhook is not None:
            await webhook.close()

    return AppContainer(
        settings=resolved_settings,
        history_service=history_service,
        chat_service=chat_service,
        recipe_service=recipe_service,
        close_resources=close_resources,
    )
