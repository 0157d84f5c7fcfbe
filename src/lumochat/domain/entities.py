"""Domain entities: users, conversations and messages.

All entities are plain Python dataclasses with NO external dependencies.
They are created by the store and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

Role = Literal["user", "assistant", "system"]


@dataclass(frozen=True)
class User:
    """A registered user.

    Attributes:
        id: Store-generated identifier.
        username: Login name, unique by convention only.
        password: Opaque credential field, stored as given.
    """

    id: str
    username: str
    password: str


@dataclass(frozen=True)
class Conversation:
    """A chat conversation.

    Attributes:
        id: Store-generated identifier.
        mode: Behaviour variant tag used to pick the persona.
        title: Optional display title.
        created_at: Creation time (UTC).
    """

    id: str
    mode: str
    title: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Message:
    """A single message within a conversation.

    Attributes:
        id: Store-generated identifier.
        conversation_id: Owning conversation (not enforced by default).
        role: Who authored the message.
        content: Message text.
        timestamp: Creation time (UTC).
    """

    id: str
    conversation_id: str
    role: Role
    content: str
    timestamp: datetime

    def to_prompt_entry(self) -> dict[str, str]:
        """Return the ``{role, content}`` pair sent to the provider."""
        return {"role": self.role, "content": self.content}
