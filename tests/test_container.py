"""Tests for container wiring."""

import asyncio

from chef_cocina.adapters.openai_chat_client import OpenAIChatClient
from chef_cocina.adapters.recipe_webhook_client import (
    HttpxRecipeWebhook,
    LoggingRecipeOutput,
)
from chef_cocina.config import Settings
from chef_cocina.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert isinstance(container.chat_service.client, OpenAIChatClient)
    assert container.chat_service.history is container.history_service
    assert isinstance(container.recipe_service.notifier.port, LoggingRecipeOutput)
    asyncio.run(container.close_resources())


def test_build_container_without_key_has_no_client() -> None:
    container = build_container(Settings(openai_api_key="MiniChef"))

    assert container.chat_service.client is None
    asyncio.run(container.close_resources())


def test_build_container_uses_webhook_when_configured() -> None:
    container = build_container(
        Settings(
            openai_api_key=None,
            recipe_webhook_url="https://parent.test/recipes",
        )
    )

    assert isinstance(container.recipe_service.notifier.port, HttpxRecipeWebhook)
    asyncio.run(container.close_resources())
