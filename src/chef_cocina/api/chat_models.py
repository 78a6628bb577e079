"""Request and response bodies for the chat API."""

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Body of a chat turn sent by the browser client."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(min_length=1)
    session_id: str | None = Field(default=None, alias="sessionId")


class ChatResponse(BaseModel):
    """Assistant reply returned to the client."""

    reply: str


class HistoryMessage(BaseModel):
    """Single message in a history listing."""

    id: int
    content: str
    sender: str
    timestamp: str


class HistoryResponse(BaseModel):
    """Messages of a session in insertion order."""

    messages: list[HistoryMessage]
