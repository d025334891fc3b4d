"""Exception hierarchy for Stylizer."""

from typing import Any


class StylizerError(Exception):
    """Base exception for all Stylizer errors."""

    pass


class ColorError(StylizerError):
    """Errors related to color values."""

    pass


class InvalidColorFormatError(ColorError, ValueError):
    """Color input could not be normalized."""

    def __init__(self, value: Any, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid color {value!r}: {reason}")


class TileError(StylizerError):
    """Errors related to tiles."""

    pass


class TileDecodeError(TileError):
    """Tile payload is present but is not a decodable image."""

    def __init__(self, tile: str, reason: str) -> None:
        self.tile = tile
        self.reason = reason
        super().__init__(f"Could not decode {tile}: {reason}")


class RasterError(StylizerError):
    """Errors related to rasters."""

    pass


class RasterReadError(RasterError):
    """Error reading a raster file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read raster '{path}': {reason}")


class SldError(StylizerError):
    """Errors related to SLD encoding."""

    pass


class SldWriteError(SldError):
    """An object could not be encoded as SLD."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"SLD encoding failed: {reason}")


class ExpressionError(StylizerError):
    """Errors related to expressions."""

    pass


class ExpressionEvaluationError(ExpressionError):
    """An expression cannot be evaluated locally."""

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"Cannot evaluate '{expression}': {reason}")


class StrokeError(StylizerError):
    """Errors related to stroke properties."""

    pass


class InvalidDashPatternError(StrokeError, ValueError):
    """Dash pattern could not be read as a list of lengths."""

    def __init__(self, dash: object, reason: str) -> None:
        self.dash = dash
        self.reason = reason
        super().__init__(f"Invalid dash pattern {dash!r}: {reason}")
