"""Outbound recipe channels to the page embedding the chat."""

import logging
from dataclasses import dataclass

import httpx

from chef_cocina.services.recipes import RecipeOutputPort

logger = logging.getLogger(__name__)


@dataclass
class HttpxRecipeWebhook(RecipeOutputPort):
    """Posts recipe messages to the parent page's relay endpoint."""

    url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, url: str) -> "HttpxRecipeWebhook":
        """Create a webhook sender with a managed httpx session."""
        return cls(url=url, http_client=httpx.AsyncClient())

    async def send(self, message: dict[str, object]) -> None:
        """Post the message once, without retrying."""
        response = await self.http_client.post(self.url, json=message, timeout=5)
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


class LoggingRecipeOutput(RecipeOutputPort):
    """Fallback channel that only logs recipes when no webhook is configured."""

    async def send(self, message: dict[str, object]) -> None:
        """Log the message type and recipe title."""
        data = message.get("data")
        title = data.get("title") if isinstance(data, dict) else None
        logger.info("Recipe ready for parent page: %s (%s)", title, message.get("type"))
