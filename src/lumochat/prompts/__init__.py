# Copyright (c) EGOGE - All Rights Reserved.
# This software may be used and distributed according to the terms of the MIT license.

"""Persona prompts for LumoChat."""

from .personas import DEFAULT_MODE, PersonaRegistry, get_system_prompt, load_persona_text

__all__ = ["DEFAULT_MODE", "PersonaRegistry", "get_system_prompt", "load_persona_text"]
