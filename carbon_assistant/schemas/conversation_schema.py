"""Response and conversation log schemas for the chat pipeline."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class Response(BaseModel):
    """What the assistant returns for one user message."""

    text: str
    suggestions: list[str] = Field(default_factory=list)
    confidence: float = Field(ge=0.0, le=1.0)
    data: Optional[dict[str, Any]] = None


class EntityRecord(BaseModel):
    type: str
    value: str
    confidence: float = Field(ge=0.0, le=1.0)


class ConversationRecord(BaseModel):
    """One processed message, kept in the assistant's in-memory log."""

    timestamp: datetime
    session_id: str
    user_message: str
    bot_response: str
    intent: str
    confidence: float = Field(ge=0.0, le=1.0)
    entities: list[EntityRecord] = Field(default_factory=list)
