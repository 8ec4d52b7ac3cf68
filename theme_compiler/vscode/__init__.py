from .colors import INTERFACE_COLORS, build_vscode_colors
from .semantic_tokens import SEMANTIC_TOKEN_ROLES, build_semantic_token_colors
from .theme import VSCodeTheme, create_theme
from .tokens import (
    TOKEN_COLOR_RULES,
    TokenColorRule,
    TokenSettings,
    build_token_colors,
    normalize_font_style,
)

__all__ = [
    "INTERFACE_COLORS",
    "SEMANTIC_TOKEN_ROLES",
    "TOKEN_COLOR_RULES",
    "TokenColorRule",
    "TokenSettings",
    "VSCodeTheme",
    "build_semantic_token_colors",
    "build_token_colors",
    "build_vscode_colors",
    "create_theme",
    "normalize_font_style",
]
