"""OpenAI Chat Completions client for the chef assistant."""

from dataclasses import dataclass

import openai
from openai import AsyncOpenAI

from chef_cocina.domain.errors import QuotaExceededError, UpstreamError
from chef_cocina.persona import QUOTA_MESSAGE, UPSTREAM_ERROR_MESSAGE
from chef_cocina.services.chat import ChatClient

INSUFFICIENT_QUOTA = "insufficient_quota"


@dataclass
class OpenAIChatClient(ChatClient):
    """Chat client backed by OpenAI Chat Completions."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIChatClient":
        """Create an OpenAI chat client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        """Call OpenAI and return the first choice's text."""
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except openai.APIError as exc:
            if _is_insufficient_quota(exc):
                raise QuotaExceededError(QUOTA_MESSAGE) from exc
            raise UpstreamError(UPSTREAM_ERROR_MESSAGE) from exc
        except openai.OpenAIError as exc:
            raise UpstreamError(UPSTREAM_ERROR_MESSAGE) from exc
        if not response.choices:
            return None
        return response.choices[0].message.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()


def _is_insufficient_quota(exc: openai.APIError) -> bool:
    """Return true when OpenAI reports an account without credit."""
    return INSUFFICIENT_QUOTA in {exc.code, exc.type}
