"""LLM adapters implementing LLMPort."""

from lumochat.infrastructure.llm.mock_adapter import MockLLMAdapter
from lumochat.infrastructure.llm.openai_adapter import OpenAIAdapter

__all__ = ["MockLLMAdapter", "OpenAIAdapter"]
