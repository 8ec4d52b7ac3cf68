import json
import logging

from ..palette import DEFAULT_PALETTE
from ..validation import validate_config

logger = logging.getLogger(__name__)

SCHEMA = "https://opencode.ai/theme.json"

# OpenCode role -> (semantic section, role) read from both the dark and light config
OPENCODE_ROLES = {
    # UI
    "primary": ("interface", "accent"),
    "secondary": ("interface", "text_secondary"),
    "accent": ("interface", "accent"),
    "error": ("interface", "error"),
    "warning": ("interface", "warning"),
    "success": ("interface", "success"),
    "info": ("interface", "info"),
    "text": ("interface", "foreground"),
    "textMuted": ("interface", "text_muted"),
    "background": ("interface", "background_editor"),
    "backgroundPanel": ("interface", "background_sidebar"),
    "backgroundElement": ("interface", "background_activity_bar"),
    "border": ("interface", "border_color"),
    "borderActive": ("interface", "text_muted"),
    "borderSubtle": ("interface", "text_inactive"),
    # Diff
    "diffAdded": ("interface", "success"),
    "diffRemoved": ("interface", "error"),
    "diffContext": ("interface", "text_muted"),
    "diffHunkHeader": ("interface", "text_muted"),
    "diffHighlightAdded": ("interface", "success"),
    "diffHighlightRemoved": ("interface", "error"),
    "diffAddedBg": ("interface", "background_sidebar"),
    "diffRemovedBg": ("interface", "background_sidebar"),
    "diffContextBg": ("interface", "background_sidebar"),
    "diffLineNumber": ("interface", "text_inactive"),
    "diffAddedLineNumberBg": ("interface", "background_sidebar"),
    "diffRemovedLineNumberBg": ("interface", "background_sidebar"),
    # Markdown
    "markdownText": ("interface", "foreground"),
    "markdownHeading": ("interface", "accent"),
    "markdownLink": ("interface", "info"),
    "markdownLinkText": ("interface", "accent"),
    "markdownCode": ("code", "string"),
    "markdownBlockQuote": ("interface", "text_muted"),
    "markdownEmph": ("interface", "warning"),
    "markdownStrong": ("interface", "modified"),
    "markdownHorizontalRule": ("interface", "text_inactive"),
    "markdownListItem": ("interface", "accent"),
    "markdownListEnumeration": ("code", "number"),
    "markdownImage": ("interface", "info"),
    "markdownImageText": ("interface", "accent"),
    "markdownCodeBlock": ("code", "foreground"),
    # Syntax
    "syntaxComment": ("code", "comment"),
    "syntaxKeyword": ("code", "keyword"),
    "syntaxFunction": ("code", "function"),
    "syntaxVariable": ("code", "parameter"),
    "syntaxString": ("code", "string"),
    "syntaxNumber": ("code", "number"),
    "syntaxType": ("code", "type"),
    "syntaxOperator": ("code", "punctuation"),
    "syntaxPunctuation": ("code", "foreground"),
}


def definition_key(reference):
    """Turn a color reference into a "defs" key: "sky.300" -> "sky300"."""
    return reference.replace(".", "")


def build_opencode_theme(dark_config, light_config, palette=None):
    """Build an OpenCode theme from a dark and a light ThemeConfig.

    Each role is a {"dark", "light"} pair of definition keys; "defs" holds
    exactly the colors those pairs use, sorted by key.

    Args:
        dark_config: ThemeConfig for the dark variant
        light_config: ThemeConfig for the light variant
        palette: Palette to resolve references against (default: Tailwind)

    Returns:
        dict: JSON-serializable OpenCode theme
    """
    if palette is None:
        palette = DEFAULT_PALETTE

    for config, expected in ((dark_config, "dark"), (light_config, "light")):
        validate_config(config, palette)
        if config.type != expected:
            logger.warning(
                'Using %s theme "%s" as the %s variant', config.type, config.name, expected
            )

    # Colors referenced by this build only
    used_colors = set()

    def color_pair(section, role):
        pair = {}
        for variant, config in (("dark", dark_config), ("light", light_config)):
            reference = getattr(getattr(config, section), role)
            used_colors.add(reference)
            pair[variant] = definition_key(reference)
        return pair

    theme = {name: color_pair(*source) for name, source in OPENCODE_ROLES.items()}

    defs = {}
    for reference in sorted(used_colors, key=definition_key):
        defs[definition_key(reference)] = palette.resolve(reference)

    logger.info(
        "Compiled OpenCode theme from %s and %s: %d roles, %d colors",
        dark_config.name,
        light_config.name,
        len(theme),
        len(defs),
    )
    return {
        "$schema": SCHEMA,
        "defs": defs,
        "theme": theme,
    }


def generate_opencode_theme(dark_config, light_config, palette=None):
    """Generate an OpenCode theme JSON string with dark and light variants.

    Returns:
        JSON string of the theme data
    """
    return json.dumps(build_opencode_theme(dark_config, light_config, palette), indent=2)
