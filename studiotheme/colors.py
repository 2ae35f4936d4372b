"""Hex color parsing for theme values."""

import re

from studiotheme.errors import MalformedColorError

RGB = tuple[int, int, int]

# Accepts 3, 4, 6 or 8 hex digits with an optional leading '#'
_HEX_PATTERN = re.compile(r"^#?(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def hex_to_rgb(value: str) -> RGB:
    """Convert a hex color string into an RGB triple.

    Shorthand forms (``#abc``, ``#abcd``) are expanded before parsing. The
    alpha channel of 4 and 8 digit colors is discarded.

    Args:
        value: Hex color such as ``"#1E1E1E"`` or ``"#1E1E1ECC"``.

    Returns:
        Tuple of (red, green, blue), each in the range 0-255.

    Raises:
        MalformedColorError: If the value is not a valid hex color.
    """
    if not isinstance(value, str) or not _HEX_PATTERN.fullmatch(value.strip()):
        raise MalformedColorError(value)

    digits = value.strip().lstrip("#")
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def format_rgb(rgb: RGB) -> str:
    """Render an RGB triple as ``"R,G,B"``."""
    return "%d,%d,%d" % rgb
