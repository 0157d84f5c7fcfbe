"""Storage port: interface for conversation persistence.

Any storage backend must implement this Protocol to be usable by the
chat-turn use case and the HTTP routes.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from lumochat.domain.entities import Conversation, Message
from lumochat.schemas import InsertConversation, InsertMessage


@runtime_checkable
class StoragePort(Protocol):
    """Protocol for conversation and message persistence adapters."""

    # -- Conversation CRUD --

    def create_conversation(self, data: InsertConversation) -> Conversation:
        ...

    def get_conversations(self) -> List[Conversation]:
        """List all conversations, newest first."""
        ...

    def get_conversation(self, conversation_id: str) -> Optional[Conversation]:
        ...

    def delete_conversation(self, conversation_id: str) -> None:
        """Delete a conversation and all its messages. Unknown ids are a no-op."""
        ...

    # -- Messages --

    def create_message(self, data: InsertMessage) -> Message:
        ...

    def get_messages(self, conversation_id: str) -> List[Message]:
        """Messages for a conversation ordered by timestamp, oldest first."""
        ...
