"""Chat orchestration between the session store and the LLM provider."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from chef_cocina.domain.chat import ChatMessage, Sender
from chef_cocina.domain.errors import QuotaExceededError, UpstreamError, ValidationError
from chef_cocina.persona import (
    FALLBACK_REPLY,
    INVALID_MESSAGE_ERROR,
    ONBOARDING_MESSAGE,
    QUOTA_MESSAGE,
    SYSTEM_PROMPT,
    UPSTREAM_ERROR_MESSAGE,
)
from chef_cocina.services.history import HistoryService

logger = logging.getLogger(__name__)

_ROLES = {Sender.USER: "user", Sender.ASSISTANT: "assistant"}


class ChatClient(Protocol):
    """Interface for LLM chat completions."""

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        """Return the text of the first completion, if any."""


@dataclass
class SessionLocks:
    """Per-session locks so requests for one session run one at a time."""

    _locks: dict[str, asyncio.Lock] = field(default_factory=dict)

    def for_session(self, session_id: str) -> asyncio.Lock:
        """Return the lock guarding the session, creating it on first use."""
        lock = self._locks.get(session_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[session_id] = lock
        return lock


@dataclass
class ChatService:
    """Handles a user turn: store, prompt, call the model, store the reply."""

    history: HistoryService
    client: ChatClient | None
    model: str
    max_tokens: int = 500
    temperature: float = 0.7
    history_limit: int = 14
    locks: SessionLocks = field(default_factory=SessionLocks)

    async def handle_user_message(self, session_id: str, text: str) -> str:
        """Return the assistant reply for a user message."""
        if not text or not text.strip():
            raise ValidationError(INVALID_MESSAGE_ERROR)

        async with self.locks.for_session(session_id):
            user_message = self.history.store.append(session_id, text, Sender.USER)

            if self.client is None:
                logger.warning(
                    "OpenAI credentials missing, replying with onboarding text",
                    extra={"session_id": session_id},
                )
                return self._store_reply(session_id, ONBOARDING_MESSAGE)

            recent = self.history.recent_messages(
                session_id, self.history_limit, exclude_id=user_message.id
            )
            messages = build_prompt(recent, text)
            try:
                reply = await self.client.complete(
                    model=self.model,
                    messages=messages,
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                )
            except QuotaExceededError:
                logger.warning(
                    "OpenAI quota exhausted", extra={"session_id": session_id}
                )
                reply = QUOTA_MESSAGE
            except UpstreamError:
                logger.exception(
                    "Chat completion failed", extra={"session_id": session_id}
                )
                raise
            except Exception as exc:
                logger.exception(
                    "Chat completion failed", extra={"session_id": session_id}
                )
                raise UpstreamError(UPSTREAM_ERROR_MESSAGE) from exc

            return self._store_reply(session_id, reply or FALLBACK_REPLY)

    def _store_reply(self, session_id: str, reply: str) -> str:
        self.history.store.append(session_id, reply, Sender.ASSISTANT)
        return reply


def build_prompt(history: list[ChatMessage], text: str) -> list[dict[str, str]]:
    """Build the chat request: persona, prior turns, then the new message."""
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    messages.extend(
        {"role": _ROLES[message.sender], "content": message.content}
        for message in history
    )
    messages.append({"role": "user", "content": text})
    return messages
