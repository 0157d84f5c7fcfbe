"""
LumoChat: chat relay with persona prompts.

Persists conversations in memory and forwards each user turn, with its
history and a persona system prompt, to a hosted chat-completions API.
"""

__version__ = "0.1.0"

from .config import ProviderConfig, RelayConfig, ServerConfig, StoreConfig
from .domain import (
    ConfigurationError,
    Conversation,
    InvalidInputError,
    LumoChatError,
    Message,
    NotFoundError,
    ProviderFailureError,
    User,
)
from .prompts import PersonaRegistry, get_system_prompt
from .storage import MemoryStore

__all__ = [
    # Configuration
    "RelayConfig",
    "ProviderConfig",
    "ServerConfig",
    "StoreConfig",
    # Entities
    "User",
    "Conversation",
    "Message",
    # Errors
    "LumoChatError",
    "InvalidInputError",
    "ProviderFailureError",
    "NotFoundError",
    "ConfigurationError",
    # Store and personas
    "MemoryStore",
    "PersonaRegistry",
    "get_system_prompt",
]
