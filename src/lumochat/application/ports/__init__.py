"""Ports: interfaces the application layer depends on."""

from lumochat.application.ports.llm_port import LLMPort
from lumochat.application.ports.storage_port import StoragePort

__all__ = ["LLMPort", "StoragePort"]
