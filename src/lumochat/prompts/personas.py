# Copyright (c) EGOGE - All Rights Reserved.
# This software may be used and distributed according to the terms of the MIT license.

"""Persona system prompts keyed by conversation mode.

Persona texts are stored as discoverable package files (``<name>.txt``)
so they can be edited and versioned without touching code.
"""

import importlib.resources
from typing import Dict, List, Optional

DEFAULT_MODE = "chat"

# mode -> persona file name (without extension)
BUILTIN_PERSONAS: Dict[str, str] = {
    "chat": "lumo",
}

# Cache for loaded persona files
_persona_cache: Dict[str, str] = {}


def load_persona_text(name: str) -> str:
    """
    Load a persona prompt shipped with the package.

    Args:
        name: Persona file name without the ``.txt`` suffix

    Returns:
        Persona prompt text

    Raises:
        FileNotFoundError: If no such persona file exists
    """
    if name in _persona_cache:
        return _persona_cache[name]

    resource = importlib.resources.files("lumochat.prompts") / f"{name}.txt"
    if not resource.is_file():
        raise FileNotFoundError(f"Persona file not found: {name}.txt")

    text = resource.read_text(encoding="utf-8").strip()
    _persona_cache[name] = text
    return text


class PersonaRegistry:
    """
    Explicit mapping from mode string to persona prompt text.

    Unknown or missing modes resolve to the persona of ``default_mode``.

    Example:
        >>> registry = PersonaRegistry()
        >>> registry.resolve("chat") == registry.resolve("anything-else")
        True
    """

    def __init__(
        self,
        personas: Optional[Dict[str, str]] = None,
        default_mode: str = DEFAULT_MODE,
    ):
        if personas is None:
            personas = {
                mode: load_persona_text(name)
                for mode, name in BUILTIN_PERSONAS.items()
            }
        if default_mode not in personas:
            raise ValueError(f"Default mode '{default_mode}' has no persona")
        self._personas = dict(personas)
        self.default_mode = default_mode

    def resolve(self, mode: Optional[str]) -> str:
        """Return the persona text for ``mode``, falling back to the default."""
        if mode and mode in self._personas:
            return self._personas[mode]
        return self._personas[self.default_mode]

    def register(self, mode: str, text: str) -> None:
        """Add or replace the persona for a mode."""
        if not mode:
            raise ValueError("Mode must be a non-empty string")
        self._personas[mode] = text

    def available_modes(self) -> List[str]:
        return sorted(self._personas)


def get_system_prompt(mode: Optional[str] = None) -> str:
    """Persona text for a mode using only the built-in personas."""
    name = BUILTIN_PERSONAS.get(mode or DEFAULT_MODE, BUILTIN_PERSONAS[DEFAULT_MODE])
    return load_persona_text(name)
