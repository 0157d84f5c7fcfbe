"""Mock LLM adapter for testing: implements LLMPort with canned responses."""

from __future__ import annotations

from typing import List, Optional

from lumochat.application.dto import LLMRequestDTO, LLMResponseDTO


class MockLLMAdapter:
    """Mock adapter that returns pre-programmed responses.

    Useful for unit-testing the chat-turn use case and the API without
    hitting a real provider.

    Args:
        responses: Ordered list of response strings (``None`` simulates an
            empty body). After the list is exhausted the last response is
            repeated.
        error: If set, every call raises this exception instead.
    """

    def __init__(
        self,
        responses: Optional[List[Optional[str]]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        if not responses and error is None:
            raise ValueError("MockLLMAdapter requires at least one response or an error")
        self._responses = responses or []
        self._error = error
        self._call_count = 0
        self.call_history: List[LLMRequestDTO] = []

    def complete(self, request: LLMRequestDTO) -> LLMResponseDTO:
        """Return the next canned response, recording the request."""
        self.call_history.append(request)
        if self._error is not None:
            raise self._error
        idx = min(self._call_count, len(self._responses) - 1)
        self._call_count += 1
        return LLMResponseDTO(content=self._responses[idx], model="mock")

    async def complete_async(self, request: LLMRequestDTO) -> LLMResponseDTO:
        return self.complete(request)

    def reset(self) -> None:
        """Reset call count and history."""
        self._call_count = 0
        self.call_history = []
