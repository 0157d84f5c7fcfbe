"""OpenAI-compatible adapter: implements LLMPort over the ``openai`` SDK.

Works against any chat-completions endpoint that speaks the OpenAI wire
format, including the Hugging Face router used by default.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import openai

from lumochat.application.dto import LLMRequestDTO, LLMResponseDTO


class OpenAIAdapter:
    """Adapter that satisfies :class:`LLMPort` with an ``openai.OpenAI`` client.

    Args:
        api_key: Provider credential.
        base_url: Chat-completions base URL.
        timeout: Request timeout in seconds; ``None`` keeps the SDK default.
        max_retries: SDK-level retries (0 disables retrying).
        client: Pre-built client, mainly for tests.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: int = 0,
        client: Optional[openai.OpenAI] = None,
    ) -> None:
        if client is None:
            kwargs = {"api_key": api_key, "base_url": base_url, "max_retries": max_retries}
            if timeout is not None:
                kwargs["timeout"] = timeout
            client = openai.OpenAI(**kwargs)
        self._client = client
        self.base_url = base_url

    def complete(self, request: LLMRequestDTO) -> LLMResponseDTO:
        """Send one chat-completions request.

        Args:
            request: Messages, model and sampling parameters.

        Returns:
            LLMResponseDTO with the first choice's content (possibly ``None``).

        Raises:
            openai.OpenAIError: If the API call fails.
        """
        params = {
            "model": request.model,
            "messages": request.messages,
            "temperature": request.temperature,
        }
        if request.max_tokens:
            params["max_tokens"] = request.max_tokens

        response = self._client.chat.completions.create(**params)
        if not response.choices:
            return LLMResponseDTO(content=None, model=response.model or request.model)

        choice = response.choices[0]
        usage = response.usage
        return LLMResponseDTO(
            content=choice.message.content,
            model=response.model or request.model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            finish_reason=choice.finish_reason,
        )

    async def complete_async(self, request: LLMRequestDTO) -> LLMResponseDTO:
        """Run :meth:`complete` in a worker thread."""
        return await asyncio.to_thread(self.complete, request)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url})"
