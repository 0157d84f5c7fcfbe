# Copyright (c) EGOGE - All Rights Reserved.
# This software may be used and distributed according to the terms of the MIT license.

"""In-memory store for users, conversations and messages."""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional
from uuid import uuid4

from lumochat.domain.entities import Conversation, Message, User
from lumochat.domain.exceptions import NotFoundError
from lumochat.schemas import InsertConversation, InsertMessage, InsertUser

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemoryStore:
    """Process-lifetime repository of users, conversations and messages.

    Lookups by unknown id return ``None`` (or an empty list) rather than
    raising. Each entity map has its own lock; when both are needed the
    conversation lock is always taken first.

    Args:
        enforce_conversation_refs: Reject messages whose conversation does
            not exist (raises ``NotFoundError``).
        clock: Source of timestamps, UTC ``datetime.now`` by default.
    """

    def __init__(
        self,
        enforce_conversation_refs: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.enforce_conversation_refs = enforce_conversation_refs
        self._clock = clock or _utcnow
        self._users: Dict[str, User] = {}
        self._conversations: Dict[str, Conversation] = {}
        self._messages: Dict[str, Message] = {}
        self._users_lock = threading.RLock()
        self._conversations_lock = threading.RLock()
        self._messages_lock = threading.RLock()

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def create_user(self, data: InsertUser) -> User:
        """Store a new user and return it."""
        user = User(id=str(uuid4()), username=data.username, password=data.password)
        with self._users_lock:
            self._users[user.id] = user
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        with self._users_lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Return the first user with a matching username, if any."""
        with self._users_lock:
            for user in self._users.values():
                if user.username == username:
                    return user
        return None

    # ------------------------------------------------------------------
    # Conversation lifecycle
    # ------------------------------------------------------------------

    def create_conversation(self, data: InsertConversation) -> Conversation:
        """Create a conversation stamped with the current time."""
        conversation = Conversation(
            id=str(uuid4()),
            mode=data.mode,
            title=data.title or None,
            created_at=self._clock(),
        )
        with self._conversations_lock:
            self._conversations[conversation.id] = conversation
        logger.debug("Created conversation %s (mode=%s)", conversation.id, conversation.mode)
        return conversation

    def get_conversations(self) -> List[Conversation]:
        """List all conversations, newest first."""
        with self._conversations_lock:
            conversations = list(self._conversations.values())
        # Stable sort: equal created_at keeps insertion order.
        return sorted(conversations, key=lambda c: c.created_at, reverse=True)

    def get_conversation(self, conversation_id: str) -> Optional[Conversation]:
        with self._conversations_lock:
            return self._conversations.get(conversation_id)

    def delete_conversation(self, conversation_id: str) -> None:
        """Delete a conversation and all of its messages.

        Deleting an unknown id is a no-op.
        """
        with self._conversations_lock, self._messages_lock:
            doomed = [
                mid for mid, m in self._messages.items()
                if m.conversation_id == conversation_id
            ]
            for mid in doomed:
                del self._messages[mid]
            existed = self._conversations.pop(conversation_id, None) is not None
        logger.debug(
            "Deleted conversation %s (existed=%s, messages=%d)",
            conversation_id, existed, len(doomed),
        )

    # ------------------------------------------------------------------
    # Message persistence
    # ------------------------------------------------------------------

    def create_message(self, data: InsertMessage) -> Message:
        """Store a message stamped with the current time.

        Raises:
            NotFoundError: If ``enforce_conversation_refs`` is set and the
                conversation does not exist.
        """
        with self._conversations_lock:
            if (
                self.enforce_conversation_refs
                and data.conversation_id not in self._conversations
            ):
                raise NotFoundError(f"Conversation {data.conversation_id} not found")
            message = Message(
                id=str(uuid4()),
                conversation_id=data.conversation_id,
                role=data.role,
                content=data.content,
                timestamp=self._clock(),
            )
            with self._messages_lock:
                self._messages[message.id] = message
        return message

    def get_messages(self, conversation_id: str) -> List[Message]:
        """Messages of a conversation, oldest first.

        ``sorted`` is stable and the map preserves insertion order, so equal
        timestamps keep their creation order.
        """
        with self._messages_lock:
            matching = [
                m for m in self._messages.values()
                if m.conversation_id == conversation_id
            ]
        return sorted(matching, key=lambda m: m.timestamp)

    def stats(self) -> Dict[str, int]:
        """Entity counts, for the health endpoint."""
        with self._users_lock:
            users = len(self._users)
        with self._conversations_lock:
            conversations = len(self._conversations)
        with self._messages_lock:
            messages = len(self._messages)
        return {"users": users, "conversations": conversations, "messages": messages}
