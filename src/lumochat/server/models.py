"""Pydantic v2 response models for the LumoChat API.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Error
# ---------------------------------------------------------------------------


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    error: ErrorDetail


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class HealthResponse(_ApiModel):
    status: str = "ok"
    version: str = "0.1.0"
    uptime_seconds: float = 0.0
    users: int = 0
    conversations: int = 0
    messages: int = 0


# ---------------------------------------------------------------------------
# Conversations and messages
# ---------------------------------------------------------------------------


class ConversationOut(_ApiModel):
    id: str
    mode: str
    title: str | None = None
    created_at: datetime


class MessageOut(_ApiModel):
    id: str
    conversation_id: str
    role: Literal["user", "assistant", "system"]
    content: str
    timestamp: datetime


class ChatTurnResponse(_ApiModel):
    user_message: MessageOut
    ai_message: MessageOut


class DeleteResponse(BaseModel):
    success: bool = True
