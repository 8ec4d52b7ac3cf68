import json
import logging
import os
import re

from ..errors import PaletteError
from .resolver import Palette

logger = logging.getLogger(__name__)

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def load_palette_from_json(json_path):
    """Load a palette from a JSON document of color reference -> hex string.

    Args:
        json_path: Path to palette JSON file

    Returns:
        Palette: Read-only palette named after the file
    """
    with open(json_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise PaletteError(f"{json_path}: invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise PaletteError(f"{json_path}: palette must be a JSON object")

    colors = {}
    for key, value in data.items():
        # Skip metadata keys
        if key.startswith("_"):
            continue

        if not isinstance(value, str) or not HEX_COLOR.match(value):
            raise PaletteError(
                f'{json_path}: color "{key}" must be a "#rrggbb" string, got {value!r}'
            )
        colors[key] = value.lower()

    name = os.path.splitext(os.path.basename(json_path))[0]
    logger.debug("Loaded palette %s with %d colors", name, len(colors))
    return Palette(colors, name=name)
