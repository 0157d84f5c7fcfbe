"""Application use cases."""

from lumochat.application.use_cases.chat_turn import FALLBACK_REPLY, ChatTurnUseCase

__all__ = ["ChatTurnUseCase", "FALLBACK_REPLY"]
