"""Color normalization.

Colors may be given as hex strings (``#ff0000``, ``ff0000``, ``#f00``),
CSS color names (``navy``), comma separated components (``"255,0,0"``) or a
sequence of three or four integer components. All of them normalize to a
lowercase ``#rrggbb`` string. Alpha components are dropped; opacity is a
separate symbolizer property.
"""

import re
from collections.abc import Sequence
from typing import Any

from PIL import ImageColor

from stylizer.exceptions import InvalidColorFormatError

_BARE_HEX = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def to_rgb(color: Any) -> tuple[int, int, int]:
    """Convert a color to an (r, g, b) tuple.

    Args:
        color: Color in any supported form

    Returns:
        Tuple of red, green and blue components (0-255)

    Raises:
        InvalidColorFormatError: If the color cannot be interpreted
    """
    if isinstance(color, str):
        return _parse_string(color)
    if isinstance(color, Sequence) and not isinstance(color, (bytes, bytearray)):
        return _parse_components(color, original=color)
    raise InvalidColorFormatError(color, f"unsupported type {type(color).__name__}")


def to_hex(color: Any) -> str | None:
    """Normalize a color to ``#rrggbb``.

    None passes through so that a color can be cleared.

    Args:
        color: Color in any supported form, or None

    Returns:
        Lowercase hex string, or None

    Raises:
        InvalidColorFormatError: If the color cannot be interpreted
    """
    if color is None:
        return None
    r, g, b = to_rgb(color)
    return f"#{r:02x}{g:02x}{b:02x}"


def _parse_string(color: str) -> tuple[int, int, int]:
    value = color.strip()
    if not value:
        raise InvalidColorFormatError(color, "empty string")

    if "," in value and not value.endswith(")"):
        parts = [p.strip() for p in value.split(",")]
        try:
            components = [int(p) for p in parts]
        except ValueError:
            raise InvalidColorFormatError(color, "components must be integers") from None
        return _parse_components(components, original=color)

    if _BARE_HEX.match(value):
        value = f"#{value}"

    try:
        rgb = ImageColor.getrgb(value)
    except ValueError as e:
        raise InvalidColorFormatError(color, str(e)) from e
    return rgb[0], rgb[1], rgb[2]


def _parse_components(components: Sequence[Any], original: Any) -> tuple[int, int, int]:
    if len(components) not in (3, 4):
        raise InvalidColorFormatError(original, "expected 3 or 4 components")

    rgb = []
    for component in components[:3]:
        if isinstance(component, bool) or not isinstance(component, int):
            raise InvalidColorFormatError(original, "components must be integers")
        if not 0 <= component <= 255:
            raise InvalidColorFormatError(original, "components must be between 0 and 255")
        rgb.append(component)
    return rgb[0], rgb[1], rgb[2]
