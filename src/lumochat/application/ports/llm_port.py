"""LLM provider port: interface for chat completions.

Any completion backend (OpenAI-compatible router, mock, etc.) must
implement this Protocol to be usable by the chat-turn use case.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lumochat.application.dto import LLMRequestDTO, LLMResponseDTO


@runtime_checkable
class LLMPort(Protocol):
    """Protocol for LLM provider adapters."""

    def complete(self, request: LLMRequestDTO) -> LLMResponseDTO:
        """Generate a completion for the request's chat messages.

        Args:
            request: Messages plus model and sampling parameters.

        Returns:
            LLMResponseDTO with the generated text.
        """
        ...

    async def complete_async(self, request: LLMRequestDTO) -> LLMResponseDTO:
        """Async version of :meth:`complete`.

        Default implementations may wrap the sync method with
        ``asyncio.to_thread``.
        """
        ...
