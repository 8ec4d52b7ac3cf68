"""Exception hierarchy for theme-compiler."""


class ThemeCompilerError(Exception):
    """Base exception for all theme-compiler errors."""


class UnresolvedColorReference(ThemeCompilerError):
    """A color reference that is not a key of the active palette.

    Attributes:
        reference: The offending color reference, e.g. "sky.301"
        location: Where the reference came from in the theme configuration
            (e.g. "theme.interface.accent"), or None for a bare lookup
    """

    def __init__(self, reference, location=None):
        self.reference = reference
        self.location = location
        if location:
            message = f'Unknown color "{reference}" in {location}'
        else:
            message = f'Unknown color "{reference}"'
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.reference, self.location))


class ThemeConfigError(ThemeCompilerError):
    """Malformed theme configuration document."""


class PaletteError(ThemeCompilerError):
    """Malformed palette document."""
