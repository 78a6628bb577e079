"""Chat history access for the orchestrator and the HTTP layer."""

from dataclasses import dataclass
from typing import Protocol

from chef_cocina.domain.chat import ChatMessage, Sender


class SessionStore(Protocol):
    """Append-only storage of chat messages grouped by session id."""

    def append(self, session_id: str, content: str, sender: Sender) -> ChatMessage:
        """Create, store and return a new message for the session."""

    def list_messages(self, session_id: str) -> list[ChatMessage]:
        """Return the session's messages in insertion order."""


@dataclass
class HistoryService:
    """Read side of the chat history."""

    store: SessionStore

    def get_history(self, session_id: str) -> list[dict[str, object]]:
        """Return a JSON-ready view of the session's messages."""
        return [
            _serialize_message(message)
            for message in self.store.list_messages(session_id)
        ]

    def recent_messages(
        self, session_id: str, limit: int, exclude_id: int | None = None
    ) -> list[ChatMessage]:
        """Return the last ``limit`` messages, oldest first."""
        messages = [
            message
            for message in self.store.list_messages(session_id)
            if message.id != exclude_id
        ]
        if limit <= 0:
            return []
        return messages[-limit:]


def _serialize_message(message: ChatMessage) -> dict[str, object]:
    return {
        "id": message.id,
        "content": message.content,
        "sender": message.sender.value,
        "timestamp": message.created_at.isoformat(),
    }
