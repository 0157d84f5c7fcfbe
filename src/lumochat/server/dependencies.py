"""FastAPI dependency injection: store, LLM adapter and use cases.

State is built once by ``create_app`` and hung off ``app.state``; routes
reach it through ``get_state`` rather than a module-level singleton.
"""

from __future__ import annotations

import logging
import time

from fastapi import Request

from lumochat.application.dto import CompletionSettings
from lumochat.application.ports.llm_port import LLMPort
from lumochat.application.use_cases.chat_turn import ChatTurnUseCase
from lumochat.config import RelayConfig
from lumochat.prompts.personas import PersonaRegistry
from lumochat.storage.memory_store import MemoryStore

logger = logging.getLogger(__name__)


class AppState:
    """Shared application state: the store, the provider and the use case."""

    def __init__(
        self,
        config: RelayConfig,
        llm: LLMPort,
        store: MemoryStore | None = None,
        personas: PersonaRegistry | None = None,
    ) -> None:
        self.start_time = time.time()
        self.config = config
        self.llm = llm
        self.store = store or MemoryStore(
            enforce_conversation_refs=config.store.enforce_conversation_refs,
        )
        self.personas = personas or PersonaRegistry()
        self.chat_turn = ChatTurnUseCase(
            store=self.store,
            llm=self.llm,
            settings=CompletionSettings(
                model=config.provider.model,
                max_tokens=config.provider.max_tokens,
                temperature=config.provider.temperature,
            ),
            personas=self.personas,
        )
        logger.info(
            "App state ready: model=%s personas=%s strict_refs=%s",
            config.provider.model,
            ",".join(self.personas.available_modes()),
            self.store.enforce_conversation_refs,
        )


def get_state(request: Request) -> AppState:
    return request.app.state.lumochat


def get_store(request: Request) -> MemoryStore:
    return get_state(request).store


def get_chat_turn(request: Request) -> ChatTurnUseCase:
    return get_state(request).chat_turn
