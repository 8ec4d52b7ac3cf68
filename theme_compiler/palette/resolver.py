from collections.abc import Mapping
from types import MappingProxyType

from ..errors import UnresolvedColorReference
from .tailwind import TAILWIND_COLORS


class Palette(Mapping):
    """Read-only table of color reference -> "#rrggbb".

    Args:
        colors: Mapping of color references to 6-digit hex strings
        name: Label used in log and error output
    """

    def __init__(self, colors, name="custom"):
        self._colors = MappingProxyType(dict(colors))
        self.name = name

    def __getitem__(self, reference):
        return self._colors[reference]

    def __iter__(self):
        return iter(self._colors)

    def __len__(self):
        return len(self._colors)

    def __repr__(self):
        return f"Palette(name={self.name!r}, colors={len(self)})"

    def resolve(self, reference, location=None):
        """Resolve a color reference to its hex value.

        Args:
            reference: Palette key, e.g. "sky.300"
            location: Optional config location reported on failure

        Returns:
            str: The "#rrggbb" value

        Raises:
            UnresolvedColorReference: If the reference is not a palette key
        """
        try:
            return self._colors[reference]
        except (KeyError, TypeError):
            raise UnresolvedColorReference(reference, location) from None


DEFAULT_PALETTE = Palette(TAILWIND_COLORS, name="tailwind")


def resolve(reference, palette=None):
    """Resolve a reference against `palette`, or the Tailwind palette."""
    if palette is None:
        palette = DEFAULT_PALETTE
    return palette.resolve(reference)
