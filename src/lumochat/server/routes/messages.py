"""Message history endpoint."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from lumochat.server.dependencies import get_store
from lumochat.server.models import MessageOut
from lumochat.storage.memory_store import MemoryStore

router = APIRouter()


@router.get("/api/messages/{conversation_id}")
async def list_messages(
    conversation_id: str,
    store: MemoryStore = Depends(get_store),  # noqa: B008
) -> List[MessageOut]:
    """Messages of a conversation, oldest first. Unknown ids yield ``[]``."""
    return [MessageOut.model_validate(m) for m in store.get_messages(conversation_id)]
