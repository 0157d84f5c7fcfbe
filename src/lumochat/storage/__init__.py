# Copyright (c) EGOGE - All Rights Reserved.
# This software may be used and distributed according to the terms of the MIT license.

"""In-memory storage for users, conversations and messages."""

from .memory_store import MemoryStore

__all__ = [
    "MemoryStore",
]
