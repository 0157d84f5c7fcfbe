"""Tests for persona prompt lookup."""

import pytest

from lumochat.prompts.personas import (
    DEFAULT_MODE,
    PersonaRegistry,
    get_system_prompt,
    load_persona_text,
)


class TestLoadPersonaText:
    def test_builtin_lumo(self):
        text = load_persona_text("lumo")
        assert text.startswith("You are **Lumo**")
        assert "Never be rude" in text

    def test_cached(self):
        assert load_persona_text("lumo") is load_persona_text("lumo")

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_persona_text("does-not-exist")


class TestGetSystemPrompt:
    @pytest.mark.parametrize("mode", ["chat", None, "", "anything"])
    def test_single_persona_for_every_mode(self, mode):
        assert get_system_prompt(mode) == load_persona_text("lumo")


class TestPersonaRegistry:
    def test_default_registry_has_chat(self):
        registry = PersonaRegistry()
        assert registry.available_modes() == [DEFAULT_MODE]
        assert registry.resolve("chat") == load_persona_text("lumo")

    def test_unknown_mode_falls_back(self):
        registry = PersonaRegistry({"chat": "default", "tutor": "teach"})
        assert registry.resolve("tutor") == "teach"
        assert registry.resolve("nope") == "default"
        assert registry.resolve(None) == "default"

    def test_register(self):
        registry = PersonaRegistry({"chat": "default"})
        registry.register("poet", "rhyme")
        assert registry.resolve("poet") == "rhyme"
        assert registry.available_modes() == ["chat", "poet"]

    def test_register_empty_mode_rejected(self):
        registry = PersonaRegistry({"chat": "default"})
        with pytest.raises(ValueError):
            registry.register("", "text")

    def test_default_mode_must_exist(self):
        with pytest.raises(ValueError):
            PersonaRegistry({"tutor": "teach"})

    def test_custom_default_mode(self):
        registry = PersonaRegistry({"tutor": "teach"}, default_mode="tutor")
        assert registry.resolve("chat") == "teach"
