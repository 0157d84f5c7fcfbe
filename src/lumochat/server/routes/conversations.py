"""Conversation endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from lumochat.schemas import InsertConversation
from lumochat.server.dependencies import get_store
from lumochat.server.models import ConversationOut, DeleteResponse
from lumochat.storage.memory_store import MemoryStore

router = APIRouter()


@router.post("/api/conversations")
async def create_conversation(
    body: InsertConversation,
    store: MemoryStore = Depends(get_store),  # noqa: B008
) -> ConversationOut:
    """Create a conversation from ``{mode, title?}``."""
    conversation = store.create_conversation(body)
    return ConversationOut.model_validate(conversation)


@router.get("/api/conversations")
async def list_conversations(
    store: MemoryStore = Depends(get_store),  # noqa: B008
) -> List[ConversationOut]:
    """List conversations, newest first."""
    return [ConversationOut.model_validate(c) for c in store.get_conversations()]


@router.get("/api/conversations/{conversation_id}")
async def get_conversation(
    conversation_id: str,
    store: MemoryStore = Depends(get_store),  # noqa: B008
) -> ConversationOut:
    conversation = store.get_conversation(conversation_id)
    if conversation is None:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return ConversationOut.model_validate(conversation)


@router.delete("/api/conversation/{conversation_id}")
async def delete_conversation(
    conversation_id: str,
    store: MemoryStore = Depends(get_store),  # noqa: B008
) -> DeleteResponse:
    """Delete a conversation and its messages. Unknown ids succeed too."""
    store.delete_conversation(conversation_id)
    return DeleteResponse(success=True)
