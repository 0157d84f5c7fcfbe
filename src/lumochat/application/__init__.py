"""Application layer: DTOs, ports and use cases."""

from lumochat.application.dto import (
    ChatTurnResultDTO,
    CompletionSettings,
    LLMRequestDTO,
    LLMResponseDTO,
)

__all__ = [
    "ChatTurnResultDTO",
    "CompletionSettings",
    "LLMRequestDTO",
    "LLMResponseDTO",
]
