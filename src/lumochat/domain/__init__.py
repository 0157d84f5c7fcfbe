"""Domain layer: entities and exceptions with no framework dependencies."""

from lumochat.domain.entities import Conversation, Message, Role, User
from lumochat.domain.exceptions import (
    ConfigurationError,
    InvalidInputError,
    LumoChatError,
    NotFoundError,
    ProviderFailureError,
)

__all__ = [
    # Entities
    "User",
    "Conversation",
    "Message",
    "Role",
    # Exceptions
    "LumoChatError",
    "InvalidInputError",
    "ProviderFailureError",
    "NotFoundError",
    "ConfigurationError",
]
