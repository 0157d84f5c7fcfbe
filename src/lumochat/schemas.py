"""Pydantic v2 insert schemas shared by the store, the use case and the API.

These validate client-supplied fields only; identifiers and timestamps
are always generated by the store.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _InsertModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class InsertUser(_InsertModel):
    username: str = Field(min_length=1)
    password: str


class InsertConversation(_InsertModel):
    mode: str = Field(min_length=1)
    title: Optional[str] = None


class InsertMessage(_InsertModel):
    conversation_id: str
    role: Literal["user", "assistant", "system"]
    content: str


class ChatMessageInput(_InsertModel):
    """Body of ``POST /api/chat/{conversation_id}``.

    ``role`` accepts any string for compatibility with the browser client
    and is always overridden to ``"user"``. Empty ``content`` is allowed.
    """

    content: str
    role: Optional[str] = None
