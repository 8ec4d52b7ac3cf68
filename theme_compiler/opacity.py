"""Alpha suffixes for composing translucent colors from opaque hex values."""

# Named percentage levels used by the mappers
LEVELS = (5, 10, 15, 35, 50, 65, 75)


def opacity_to_hex(opacity):
    """Convert 0.0-1.0 opacity to hex string (00-ff)."""
    clamped = max(0.0, min(1.0, opacity))
    return f"{int(clamped * 255):02x}"


# 5: "0c", 10: "19", 15: "26", 35: "59", 50: "7f", 65: "a5", 75: "bf"
OPACITY = {level: opacity_to_hex(level / 100) for level in LEVELS}


def with_opacity(hex_color, level):
    """Append the alpha suffix for `level` to a "#rrggbb" color.

    Args:
        hex_color: Opaque 6-digit hex color
        level: One of LEVELS

    Returns:
        str: 8-digit "#rrggbbaa" color
    """
    try:
        suffix = OPACITY[level]
    except KeyError:
        raise ValueError(f"Unknown opacity level {level!r}, expected one of {LEVELS}") from None
    return f"{hex_color}{suffix}"
