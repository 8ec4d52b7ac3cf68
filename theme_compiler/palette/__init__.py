from .loader import load_palette_from_json
from .resolver import DEFAULT_PALETTE, Palette, resolve
from .tailwind import TAILWIND_COLORS

__all__ = [
    "DEFAULT_PALETTE",
    "Palette",
    "TAILWIND_COLORS",
    "load_palette_from_json",
    "resolve",
]
