"""Semantic theme model.

A theme is described by a handful of purpose-based color roles instead of the
hundreds of keys an editor theme needs. Each role holds a palette reference
such as "sky.300"; the mappers in ``theme_compiler.vscode`` and
``theme_compiler.opencode`` expand the roles into concrete output formats.
"""

from __future__ import annotations

import json
import re
from dataclasses import MISSING, dataclass, field, fields
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .errors import ThemeConfigError

THEME_TYPES = ("light", "dark")

BRACKET_COUNT = 6


@dataclass(frozen=True)
class SemanticInterfaceTheme:
    """Workbench roles, expanded to every VS Code UI color key."""

    # Text
    foreground: str
    text_secondary: str
    text_muted: str
    text_inactive: str

    # Backgrounds
    background_editor: str
    background_sidebar: str
    background_activity_bar: str
    background_hover: str

    # Accent and status
    accent: str
    error: str
    warning: str
    success: str
    info: str
    modified: str

    # Cursor and selection
    cursor: str
    selection: str

    # Rainbow bracket colors, exactly six when given
    bracket_colors: Optional[Tuple[str, ...]] = None

    # Panel borders in the OpenCode format, text_muted when unset
    border: Optional[str] = None

    def __post_init__(self):
        if self.bracket_colors is not None:
            brackets = tuple(self.bracket_colors)
            if len(brackets) != BRACKET_COUNT:
                raise ThemeConfigError(
                    f"bracket_colors needs exactly {BRACKET_COUNT} colors, got {len(brackets)}"
                )
            object.__setattr__(self, "bracket_colors", brackets)

    @property
    def brackets(self):
        """The six bracket colors, falling back to the status roles."""
        if self.bracket_colors is not None:
            return self.bracket_colors
        return (self.accent, self.warning, self.modified, self.success, self.info, self.accent)

    @property
    def border_color(self):
        return self.border or self.text_muted


@dataclass(frozen=True)
class SemanticCodeTheme:
    """Syntax roles, expanded to TextMate rules and semantic token colors."""

    foreground: str
    comment: str
    string: str
    number: str
    punctuation: str
    keyword: str
    control_flow: str
    storage: str
    import_: str
    type: str
    modifier: str
    primitive: str
    function: str
    parameter: str
    property: str
    attribute: str
    tag: str


@dataclass(frozen=True)
class ThemeConfig:
    """Everything needed to compile one theme.

    Overrides map a concrete output key (a VS Code color key, or a semantic
    token selector) to a palette reference and always win over generated
    values.
    """

    name: str
    file_name: str
    type: str
    interface: SemanticInterfaceTheme
    code: SemanticCodeTheme
    color_overrides: Mapping[str, str] = field(default_factory=dict)
    semantic_token_colors: Mapping[str, str] = field(default_factory=dict)

    # Override maps are read-only views, which are unhashable
    __hash__ = None

    def __post_init__(self):
        if self.type not in THEME_TYPES:
            raise ThemeConfigError(
                f'Theme "{self.name}" has type {self.type!r}, expected "light" or "dark"'
            )
        object.__setattr__(
            self, "color_overrides", MappingProxyType(dict(self.color_overrides or {}))
        )
        object.__setattr__(
            self,
            "semantic_token_colors",
            MappingProxyType(dict(self.semantic_token_colors or {})),
        )

    @property
    def is_dark(self):
        return self.type == "dark"

    @property
    def ui_theme(self):
        return "vs" if self.type == "light" else "vs-dark"

    @classmethod
    def from_dict(cls, data):
        """Build a config from a JSON-style document.

        Keys may be camelCase (``fileName``, ``backgroundEditor``) or
        snake_case. The semantic roles live under ``theme.interface`` and
        ``theme.code``.
        """
        data = {_snake_case(k): v for k, v in data.items()}
        # Always enabled in the output
        data.pop("semantic_highlighting", None)

        unknown = set(data) - _CONFIG_KEYS
        if unknown:
            raise ThemeConfigError(f"Unknown theme config keys: {', '.join(sorted(unknown))}")

        theme = data.pop("theme", None)
        if not isinstance(theme, dict):
            raise ThemeConfigError('Theme config needs a "theme" object with interface and code')

        for required in ("name", "file_name", "type"):
            if required not in data:
                raise ThemeConfigError(f'Theme config is missing "{required}"')

        return cls(
            interface=_build_roles(SemanticInterfaceTheme, theme.get("interface"), "theme.interface"),
            code=_build_roles(SemanticCodeTheme, theme.get("code"), "theme.code"),
            **data,
        )


_CONFIG_KEYS = {
    "name",
    "file_name",
    "type",
    "theme",
    "color_overrides",
    "semantic_token_colors",
}


def _snake_case(key):
    return re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", key).lower()


def _build_roles(role_cls, roles, section):
    if not isinstance(roles, dict):
        raise ThemeConfigError(f'Theme config is missing the "{section}" object')

    names = {f.name for f in fields(role_cls)}
    kwargs = {}
    for key, value in roles.items():
        name = _snake_case(key)
        if name == "import":
            name = "import_"
        if name not in names:
            raise ThemeConfigError(f'Unknown role "{key}" in {section}')
        kwargs[name] = value

    missing = [f.name for f in fields(role_cls) if f.name not in kwargs and f.default is MISSING]
    if missing:
        raise ThemeConfigError(f"Missing roles in {section}: {', '.join(missing)}")

    return role_cls(**kwargs)


def load_theme_config(json_path):
    """Load a ThemeConfig from a JSON file."""
    with open(json_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ThemeConfigError(f"{json_path}: invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ThemeConfigError(f"{json_path}: theme config must be a JSON object")
    return ThemeConfig.from_dict(data)
