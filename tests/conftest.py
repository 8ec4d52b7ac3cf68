"""Shared fixtures for theme-compiler tests."""

from __future__ import annotations

import pytest

from theme_compiler.semantic import SemanticCodeTheme, SemanticInterfaceTheme, ThemeConfig
from theme_compiler.vscode import VSCodeTheme


@pytest.fixture
def interface_roles():
    """Minimal valid interface roles (no bracket colors, no border)."""
    return {
        "foreground": "stone.800",
        "text_secondary": "stone.500",
        "text_muted": "stone.400",
        "text_inactive": "stone.400",
        "background_editor": "stone.50",
        "background_sidebar": "stone.100",
        "background_activity_bar": "stone.200",
        "background_hover": "stone.800",
        "accent": "pink.600",
        "error": "pink.600",
        "warning": "orange.600",
        "success": "teal.700",
        "info": "blue.700",
        "modified": "amber.700",
        "cursor": "stone.800",
        "selection": "stone.500",
    }


@pytest.fixture
def code_roles():
    """Minimal valid code roles."""
    return {
        "foreground": "stone.200",
        "comment": "stone.500",
        "string": "teal.400",
        "number": "amber.400",
        "punctuation": "orange.400",
        "keyword": "pink.500",
        "control_flow": "rose.400",
        "storage": "pink.300",
        "import_": "orange.500",
        "type": "blue.500",
        "modifier": "amber.300",
        "primitive": "amber.500",
        "function": "teal.500",
        "parameter": "blue.300",
        "property": "blue.400",
        "attribute": "pink.400",
        "tag": "rose.400",
    }


@pytest.fixture
def make_config(interface_roles, code_roles):
    """Factory for ThemeConfig objects with selected roles replaced."""

    def factory(interface=None, code=None, **config):
        config.setdefault("name", "Test Theme")
        config.setdefault("file_name", "test-theme.json")
        config.setdefault("type", "dark")
        return ThemeConfig(
            interface=SemanticInterfaceTheme(**{**interface_roles, **(interface or {})}),
            code=SemanticCodeTheme(**{**code_roles, **(code or {})}),
            **config,
        )

    return factory


@pytest.fixture
def make_theme(make_config):
    """Factory for validated VSCodeTheme objects."""

    def factory(interface=None, code=None, palette=None, **config):
        return VSCodeTheme(make_config(interface, code, **config), palette=palette)

    return factory


@pytest.fixture
def config_document():
    """A camelCase JSON theme config document."""
    return {
        "name": "Json Theme",
        "fileName": "json-theme.json",
        "type": "light",
        "semanticHighlighting": True,
        "theme": {
            "interface": {
                "foreground": "gray.900",
                "textSecondary": "gray.700",
                "textMuted": "gray.500",
                "textInactive": "gray.400",
                "backgroundEditor": "gray.100",
                "backgroundSidebar": "gray.200",
                "backgroundActivityBar": "gray.300",
                "backgroundHover": "zinc.200",
                "accent": "sky.600",
                "error": "red.400",
                "warning": "orange.400",
                "success": "green.600",
                "info": "blue.500",
                "modified": "amber.500",
                "cursor": "zinc.600",
                "selection": "blue.500",
                "bracketColors": [
                    "rose.600",
                    "amber.600",
                    "green.600",
                    "blue.600",
                    "violet.600",
                    "cyan.600",
                ],
            },
            "code": {
                "foreground": "gray.600",
                "comment": "zinc.400",
                "string": "lime.700",
                "number": "amber.600",
                "punctuation": "orange.500",
                "keyword": "purple.600",
                "controlFlow": "rose.400",
                "storage": "rose.400",
                "import": "orange.500",
                "type": "amber.600",
                "modifier": "amber.500",
                "primitive": "amber.500",
                "function": "teal.600",
                "parameter": "cyan.600",
                "property": "sky.600",
                "attribute": "purple.500",
                "tag": "rose.400",
            },
        },
        "colorOverrides": {"activityBar.activeBorder": "rose.500"},
    }
