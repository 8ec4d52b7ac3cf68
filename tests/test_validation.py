"""Tests for color reference validation."""

from __future__ import annotations

import pytest

from theme_compiler.errors import UnresolvedColorReference
from theme_compiler.palette import DEFAULT_PALETTE
from theme_compiler.validation import iter_color_references, validate_config


class TestIterColorReferences:
    def test_locations(self, make_config):
        config = make_config(
            interface={"bracket_colors": ["rose.400"] * 6},
            color_overrides={"badge.background": "rose.500"},
            semantic_token_colors={"operator": "orange.400"},
        )
        locations = dict(iter_color_references(config))

        assert locations["theme.interface.accent"] == "pink.600"
        assert locations["theme.interface.bracket_colors[2]"] == "rose.400"
        assert locations["theme.code.import_"] == "orange.500"
        assert locations["color_overrides['badge.background']"] == "rose.500"
        assert locations["semantic_token_colors['operator']"] == "orange.400"

    def test_skips_unset_optional_roles(self, make_config):
        locations = dict(iter_color_references(make_config()))
        assert "theme.interface.border" not in locations
        assert not any(key.startswith("theme.interface.bracket_colors") for key in locations)

    def test_order_is_deterministic(self, make_config):
        config = make_config()
        first = list(iter_color_references(config))
        assert first == list(iter_color_references(config))
        assert first[0] == ("theme.interface.foreground", "stone.800")


class TestValidateConfig:
    def test_valid_config(self, make_config):
        validate_config(make_config(), DEFAULT_PALETTE)

    def test_unknown_interface_color(self, make_config):
        config = make_config(interface={"foreground": "invalid.color"})
        with pytest.raises(UnresolvedColorReference, match=r'"invalid\.color" in theme\.interface\.foreground'):
            validate_config(config, DEFAULT_PALETTE)

    def test_unknown_code_color(self, make_config):
        config = make_config(code={"comment": "invalid.color"})
        with pytest.raises(UnresolvedColorReference, match="theme.code.comment"):
            validate_config(config, DEFAULT_PALETTE)

    def test_unknown_override_color(self, make_config):
        config = make_config(color_overrides={"activityBar.activeBorder": "invalid.color"})
        with pytest.raises(UnresolvedColorReference, match="activityBar.activeBorder"):
            validate_config(config, DEFAULT_PALETTE)

    def test_unknown_semantic_token_color(self, make_config):
        config = make_config(semantic_token_colors={"operator": "invalid.color"})
        with pytest.raises(UnresolvedColorReference, match="semantic_token_colors"):
            validate_config(config, DEFAULT_PALETTE)

    def test_unknown_bracket_color(self, make_config):
        brackets = ["rose.400", "amber.400", "nope.1", "blue.400", "violet.400", "cyan.400"]
        config = make_config(interface={"bracket_colors": brackets})
        with pytest.raises(UnresolvedColorReference, match=r"bracket_colors\[2\]"):
            validate_config(config, DEFAULT_PALETTE)

    def test_reports_first_unknown_reference(self, make_config):
        config = make_config(
            interface={"accent": "first.bad"},
            code={"comment": "second.bad"},
        )
        with pytest.raises(UnresolvedColorReference) as excinfo:
            validate_config(config, DEFAULT_PALETTE)
        assert excinfo.value.reference == "first.bad"

    def test_empty_overrides_are_ignored(self, make_config):
        config = make_config(
            color_overrides={"badge.background": ""},
            semantic_token_colors={"operator": None},
        )
        locations = dict(iter_color_references(config))
        assert not any(key.startswith("color_overrides") for key in locations)
        assert not any(key.startswith("semantic_token_colors") for key in locations)
        validate_config(config, DEFAULT_PALETTE)
