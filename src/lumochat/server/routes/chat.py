"""Chat endpoint: POST /api/chat/{conversation_id}."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from lumochat.application.use_cases.chat_turn import ChatTurnUseCase
from lumochat.server.dependencies import get_chat_turn
from lumochat.server.models import ChatTurnResponse, MessageOut

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/chat/{conversation_id}")
async def submit_chat(
    conversation_id: str,
    payload: Any = Body(default=None),  # noqa: B008
    mode: Optional[str] = Query(default=None),
    chat_turn: ChatTurnUseCase = Depends(get_chat_turn),  # noqa: B008
) -> ChatTurnResponse:
    """Run one chat turn and return both persisted messages.

    The body is validated by the use case so an invalid payload never
    reaches the store. ``InvalidInputError`` and ``ProviderFailureError``
    are turned into 400/500 responses by the app's exception handlers.
    """
    result = await chat_turn.execute_async(conversation_id, mode, payload or {})
    return ChatTurnResponse(
        user_message=MessageOut.model_validate(result.user_message),
        ai_message=MessageOut.model_validate(result.ai_message),
    )
