"""Compile semantic color roles into VS Code and OpenCode themes."""

from .errors import PaletteError, ThemeCompilerError, ThemeConfigError, UnresolvedColorReference
from .opencode import build_opencode_theme, generate_opencode_theme
from .palette import DEFAULT_PALETTE, Palette, load_palette_from_json
from .semantic import SemanticCodeTheme, SemanticInterfaceTheme, ThemeConfig, load_theme_config
from .validation import validate_config
from .vscode import VSCodeTheme, create_theme

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PALETTE",
    "Palette",
    "PaletteError",
    "SemanticCodeTheme",
    "SemanticInterfaceTheme",
    "ThemeCompilerError",
    "ThemeConfig",
    "ThemeConfigError",
    "UnresolvedColorReference",
    "VSCodeTheme",
    "build_opencode_theme",
    "create_theme",
    "generate_opencode_theme",
    "load_palette_from_json",
    "load_theme_config",
    "validate_config",
]
