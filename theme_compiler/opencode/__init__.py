from .theme import OPENCODE_ROLES, build_opencode_theme, definition_key, generate_opencode_theme

__all__ = ["OPENCODE_ROLES", "build_opencode_theme", "definition_key", "generate_opencode_theme"]
