"""Process-local session store."""

import threading
from collections import defaultdict
from datetime import UTC, datetime
from itertools import count

from chef_cocina.domain.chat import ChatMessage, Sender
from chef_cocina.services.history import SessionStore


class InMemorySessionStore(SessionStore):
    """Keeps chat messages in memory for the lifetime of the process."""

    def __init__(self) -> None:
        self._sessions: defaultdict[str, list[ChatMessage]] = defaultdict(list)
        self._ids = count(1)
        self._lock = threading.Lock()

    def append(self, session_id: str, content: str, sender: Sender) -> ChatMessage:
        """Store a message under the next id."""
        with self._lock:
            message = ChatMessage(
                id=next(self._ids),
                content=content,
                sender=sender,
                session_id=session_id,
                created_at=datetime.now(tz=UTC),
            )
            self._sessions[session_id].append(message)
        return message

    def list_messages(self, session_id: str) -> list[ChatMessage]:
        """Return a copy of the session's messages."""
        with self._lock:
            return list(self._sessions.get(session_id, ()))
