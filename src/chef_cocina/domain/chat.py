"""Domain models for chat history."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class Sender(StrEnum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """Represents a stored chat message."""

    id: int
    content: str
    sender: Sender
    session_id: str
    created_at: datetime
