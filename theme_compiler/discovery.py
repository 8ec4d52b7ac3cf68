"""Find theme definitions in a directory.

Two kinds of theme source are recognized:

* Python modules (``*.py``, except ``_*.py`` and ``test_*.py``) exporting one
  or more ``VSCodeTheme`` instances at module level.
* JSON theme configs (``*.json``), compiled against the given palette.
"""

import importlib.util
import logging
import os
import sys

from .errors import ThemeCompilerError
from .semantic import load_theme_config
from .vscode import VSCodeTheme

logger = logging.getLogger(__name__)


def theme_sources(themes_dir):
    """List the theme source files of a directory, sorted by file name."""
    sources = []
    for filename in sorted(os.listdir(themes_dir)):
        if filename.startswith(("_", "test_")):
            continue
        if filename.endswith((".py", ".json")):
            sources.append(os.path.join(themes_dir, filename))
    return sources


def _import_from_path(path):
    name = "_theme_source_" + os.path.splitext(os.path.basename(path))[0]
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(name, None)
        raise
    return module


def load_theme_source(path, palette=None):
    """Load the themes defined by one source file.

    Args:
        path: Path to a theme module or JSON theme config
        palette: Palette for JSON configs (default: Tailwind); modules build
            their themes against whatever palette they choose

    Returns:
        list: (export name, VSCodeTheme) pairs, in definition order
    """
    if path.endswith(".json"):
        name = os.path.splitext(os.path.basename(path))[0]
        return [(name, VSCodeTheme(load_theme_config(path), palette=palette))]

    module = _import_from_path(path)
    return [
        (attr, value) for attr, value in vars(module).items() if isinstance(value, VSCodeTheme)
    ]


def discover_themes(themes_dir, palette=None):
    """Load every theme found in `themes_dir`.

    Returns:
        list: VSCodeTheme objects, ordered by source file then definition

    Raises:
        ThemeCompilerError: Prefixed with the path of the failing source
    """
    themes = []
    seen = set()
    for path in theme_sources(themes_dir):
        try:
            found = load_theme_source(path, palette=palette)
        except ThemeCompilerError as e:
            raise ThemeCompilerError(f"{path}: {e}") from e
        for export_name, theme in found:
            if id(theme) in seen:
                continue
            seen.add(id(theme))
            logger.info("Found theme %s in %s", export_name, os.path.basename(path))
            themes.append(theme)
    return themes
