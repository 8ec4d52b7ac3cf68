"""Tests for the workbench color mapping."""

from __future__ import annotations

import re

import pytest

from theme_compiler.palette import DEFAULT_PALETTE
from theme_compiler.semantic import SemanticInterfaceTheme
from theme_compiler.vscode.colors import INTERFACE_COLORS, build_vscode_colors, derive_color

HEX = re.compile(r"^#[0-9a-f]{6}([0-9a-f]{2})?$")


@pytest.fixture
def interface(interface_roles):
    return SemanticInterfaceTheme(**interface_roles)


class TestInterfaceColors:
    def test_table_size(self):
        assert len(INTERFACE_COLORS) == 551

    def test_every_key_has_a_color(self, interface):
        colors = build_vscode_colors(interface, DEFAULT_PALETTE)
        assert list(colors) == list(INTERFACE_COLORS)
        for key, value in colors.items():
            assert HEX.match(value), key

    def test_plain_role(self, interface):
        colors = build_vscode_colors(interface, DEFAULT_PALETTE)
        assert colors["activityBarBadge.background"] == "#db2777"
        assert colors["editor.background"] == "#fafaf9"
        assert colors["editorCursor.foreground"] == "#292524"

    def test_opacity_composition(self, interface):
        colors = build_vscode_colors(interface, DEFAULT_PALETTE)
        assert colors["toolbar.hoverBackground"] == "#29252459"
        assert colors["editor.selectionBackground"] == "#78716c26"
        assert colors["editor.lineHighlightBackground"] == "#2925240c"
        assert colors["editorUnnecessaryCode.opacity"] == "#000000a5"

    def test_bracket_fallback(self, interface):
        colors = build_vscode_colors(interface, DEFAULT_PALETTE)
        assert [colors[f"editorBracketHighlight.foreground{i}"] for i in range(1, 7)] == [
            "#db2777",
            "#ea580c",
            "#b45309",
            "#0f766e",
            "#1d4ed8",
            "#db2777",
        ]

    def test_explicit_brackets(self, interface_roles):
        brackets = ["rose.400", "amber.400", "green.400", "blue.400", "violet.400", "cyan.400"]
        interface = SemanticInterfaceTheme(**interface_roles, bracket_colors=brackets)
        colors = build_vscode_colors(interface, DEFAULT_PALETTE)
        assert colors["editorBracketHighlight.foreground1"] == "#fb7185"
        assert colors["editorBracketHighlight.foreground4"] == "#60a5fa"

    def test_border_swatch_ignores_border_role(self, interface_roles):
        interface = SemanticInterfaceTheme(**{**interface_roles, "border": "sky.300"})
        colors = build_vscode_colors(interface, DEFAULT_PALETTE)
        assert colors["activityBar.border"] == "#a8a29e"

    def test_derive_color(self):
        swatches = {"accent": "#7dd3fc"}
        assert derive_color(swatches, "accent") == "#7dd3fc"
        assert derive_color(swatches, ("accent", 50)) == "#7dd3fc7f"

    def test_table_uses_known_swatches(self, interface):
        from theme_compiler.vscode.colors import _swatches

        swatches = _swatches(interface, DEFAULT_PALETTE)
        for key, derivation in INTERFACE_COLORS.items():
            name = derivation[0] if isinstance(derivation, tuple) else derivation
            assert name in swatches, key
