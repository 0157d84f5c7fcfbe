"""Domain exceptions raised by the store and the chat-turn use case.

These exceptions form a hierarchy rooted at ``LumoChatError`` and are
free of any HTTP concerns. The server layer maps them to status codes.
"""


class LumoChatError(Exception):
    """Base exception for all LumoChat errors."""


class InvalidInputError(LumoChatError):
    """Raised when an inbound payload fails schema validation."""

    def __init__(self, message: str, errors: list | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ProviderFailureError(LumoChatError):
    """Raised when the completion provider call fails."""


class NotFoundError(LumoChatError):
    """Raised when a referenced entity does not exist."""


class ConfigurationError(LumoChatError):
    """Raised when configuration is invalid or incomplete."""
