"""Use case: run one chat turn against the completion provider.

Reads the conversation history, prepends the persona prompt, persists the
user message, calls the provider and persists the assistant reply.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from lumochat.application.dto import (
    ChatTurnResultDTO,
    CompletionSettings,
    LLMRequestDTO,
    LLMResponseDTO,
)
from lumochat.application.ports.llm_port import LLMPort
from lumochat.application.ports.storage_port import StoragePort
from lumochat.domain.entities import Message
from lumochat.domain.exceptions import InvalidInputError, ProviderFailureError
from lumochat.prompts.personas import DEFAULT_MODE, PersonaRegistry
from lumochat.schemas import ChatMessageInput, InsertMessage

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "I apologize, but I couldn't generate a response. Please try again."


class ChatTurnUseCase:
    """Orchestrates a single user turn and its assistant reply.

    Args:
        store: Storage port holding conversations and messages.
        llm: LLM port adapter for generating completions.
        settings: Model and sampling parameters for every request.
        personas: Registry mapping conversation mode to persona text.
    """

    def __init__(
        self,
        store: StoragePort,
        llm: LLMPort,
        settings: CompletionSettings,
        personas: Optional[PersonaRegistry] = None,
    ) -> None:
        self._store = store
        self._llm = llm
        self._settings = settings
        self._personas = personas or PersonaRegistry()

    # ------------------------------------------------------------------
    # Steps shared by the sync and async paths
    # ------------------------------------------------------------------

    @staticmethod
    def validate(payload: Mapping[str, Any]) -> ChatMessageInput:
        """Check the inbound payload shape.

        Raises:
            InvalidInputError: If the payload is not a valid chat message.
        """
        try:
            return ChatMessageInput.model_validate(payload)
        except ValidationError as exc:
            raise InvalidInputError(
                "Invalid message format", errors=exc.errors(include_url=False)
            ) from exc

    def build_prompt(
        self, mode: Optional[str], history: List[Message], content: str
    ) -> List[Dict[str, str]]:
        """System persona, then history oldest first, then the new message."""
        messages = [{"role": "system", "content": self._personas.resolve(mode)}]
        messages.extend(m.to_prompt_entry() for m in history)
        messages.append({"role": "user", "content": content})
        return messages

    def _begin_turn(
        self, conversation_id: str, mode: Optional[str], payload: Mapping[str, Any]
    ) -> Tuple[Message, LLMRequestDTO]:
        body = self.validate(payload)
        mode = mode or DEFAULT_MODE

        history = self._store.get_messages(conversation_id)
        prompt = self.build_prompt(mode, history, body.content)

        # Recorded before the provider call so it survives a failed reply.
        user_message = self._store.create_message(
            InsertMessage(conversation_id=conversation_id, role="user", content=body.content)
        )
        logger.info(
            "Chat turn [conversation=%s, mode=%s, history=%d, chars=%d]",
            conversation_id, mode, len(history), len(body.content),
        )
        request = LLMRequestDTO(
            messages=prompt,
            model=self._settings.model,
            temperature=self._settings.temperature,
            max_tokens=self._settings.max_tokens,
        )
        return user_message, request

    def _finish_turn(
        self, conversation_id: str, user_message: Message, response: LLMResponseDTO
    ) -> ChatTurnResultDTO:
        reply = response.content or FALLBACK_REPLY
        ai_message = self._store.create_message(
            InsertMessage(conversation_id=conversation_id, role="assistant", content=reply)
        )
        logger.debug(
            "Chat turn complete [conversation=%s, tokens in=%d out=%d]",
            conversation_id, response.input_tokens, response.output_tokens,
        )
        return ChatTurnResultDTO(user_message=user_message, ai_message=ai_message)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def execute(
        self,
        conversation_id: str,
        mode: Optional[str],
        payload: Mapping[str, Any],
    ) -> ChatTurnResultDTO:
        """Run a chat turn synchronously.

        Args:
            conversation_id: Conversation the turn belongs to.
            mode: Conversation mode selecting the persona (``"chat"`` if empty).
            payload: Raw request body, ``{"content": ..., "role": ...}``.

        Returns:
            ChatTurnResultDTO with the persisted user and assistant messages.

        Raises:
            InvalidInputError: Payload failed validation; nothing was stored.
            ProviderFailureError: Provider call failed; the user message remains.
        """
        user_message, request = self._begin_turn(conversation_id, mode, payload)
        try:
            response = self._llm.complete(request)
        except Exception as exc:
            logger.error("Provider call failed for conversation %s", conversation_id, exc_info=True)
            raise ProviderFailureError(str(exc)) from exc
        return self._finish_turn(conversation_id, user_message, response)

    async def execute_async(
        self,
        conversation_id: str,
        mode: Optional[str],
        payload: Mapping[str, Any],
    ) -> ChatTurnResultDTO:
        """Async variant of :meth:`execute`; the provider call is the only await."""
        user_message, request = self._begin_turn(conversation_id, mode, payload)
        try:
            response = await self._llm.complete_async(request)
        except Exception as exc:
            logger.error("Provider call failed for conversation %s", conversation_id, exc_info=True)
            raise ProviderFailureError(str(exc)) from exc
        return self._finish_turn(conversation_id, user_message, response)
