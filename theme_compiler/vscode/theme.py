import json
import logging

from ..palette import DEFAULT_PALETTE
from ..validation import validate_config
from .colors import build_vscode_colors
from .semantic_tokens import build_semantic_token_colors
from .tokens import build_token_colors

logger = logging.getLogger(__name__)

SCHEMA = "vscode://schemas/color-theme"


class VSCodeTheme:
    """A VS Code color theme compiled from a ThemeConfig.

    The config is validated against the palette on construction, so an
    unknown color reference fails before any output is produced.

    Args:
        config: ThemeConfig describing the theme
        palette: Palette to resolve references against (default: Tailwind)
    """

    def __init__(self, config, palette=None):
        self._config = config
        self._palette = palette if palette is not None else DEFAULT_PALETTE
        validate_config(config, self._palette)

    def __repr__(self):
        return f"VSCodeTheme(name={self.name!r}, type={self.type!r})"

    def __str__(self):
        return self.to_string()

    @property
    def config(self):
        return self._config

    @property
    def palette(self):
        return self._palette

    @property
    def name(self):
        return self._config.name

    @property
    def file_name(self):
        return self._config.file_name

    @property
    def type(self):
        return self._config.type

    @property
    def ui_theme(self):
        """The package manifest "uiTheme" value: "vs" or "vs-dark"."""
        return self._config.ui_theme

    def to_json(self):
        """Build the theme document.

        Returns:
            dict: JSON-serializable VS Code color theme
        """
        config = self._config
        resolve = self._palette.resolve

        semantic_token_colors = {
            selector: resolve(reference, location=f"semantic_token_colors[{selector!r}]")
            for selector, reference in build_semantic_token_colors(
                config.code, config.semantic_token_colors
            ).items()
        }

        colors = build_vscode_colors(config.interface, self._palette)
        for key, reference in config.color_overrides.items():
            if reference:
                colors[key] = resolve(reference, location=f"color_overrides[{key!r}]")

        token_colors = [
            rule.resolve(self._palette)
            for rule in build_token_colors(config.code, config.interface.error)
        ]

        logger.info(
            "Compiled %s: %d colors, %d token rules",
            config.name,
            len(colors),
            len(token_colors),
        )
        return {
            "$schema": SCHEMA,
            "name": config.name,
            "semanticHighlighting": True,
            "semanticTokenColors": semantic_token_colors,
            "colors": colors,
            "tokenColors": token_colors,
        }

    def to_string(self, pretty=True):
        """Serialize the theme, indented by two spaces unless `pretty` is False."""
        if pretty:
            return json.dumps(self.to_json(), indent=2)
        return json.dumps(self.to_json(), separators=(",", ":"))


def create_theme(config, palette=None):
    """Create a validated VSCodeTheme from a config."""
    return VSCodeTheme(config, palette=palette)
