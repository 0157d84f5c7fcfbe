"""Data Transfer Objects for crossing layer boundaries.

DTOs are simple dataclasses used to pass data between layers without
creating coupling to infrastructure types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from lumochat.domain.entities import Message


@dataclass
class LLMRequestDTO:
    """Data needed to make an LLM completion request.

    Attributes:
        messages: Chat messages in [{role, content}] format.
        model: Model identifier string.
        temperature: Sampling temperature.
        max_tokens: Maximum tokens to generate.
    """

    messages: List[Dict[str, str]]
    model: str
    temperature: float = 0.9
    max_tokens: Optional[int] = 2000


@dataclass
class LLMResponseDTO:
    """Data returned from an LLM completion.

    Attributes:
        content: Generated text, ``None`` when the provider returned no body.
        model: Model that produced the response.
        input_tokens: Input token count (from API, if available).
        output_tokens: Output token count (from API, if available).
        finish_reason: Why generation stopped.
    """

    content: Optional[str]
    model: str = ""
    input_tokens: int = 0
    output_tokens: int = 0
    finish_reason: Optional[str] = None


@dataclass
class CompletionSettings:
    """Fixed sampling parameters applied to every chat turn."""

    model: str
    max_tokens: int = 2000
    temperature: float = 0.9


@dataclass
class ChatTurnResultDTO:
    """Both messages persisted by one chat turn."""

    user_message: Message
    ai_message: Message
