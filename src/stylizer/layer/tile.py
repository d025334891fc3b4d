"""Tile value object.

A tile is identified by its zoom level and column/row coordinates and
may carry an image-encoded payload (PNG, JPEG, ...).
"""

import base64
import io

from PIL import Image, UnidentifiedImageError

from stylizer.exceptions import TileDecodeError


class Tile:
    """An identified chunk of raster imagery.

    Two tiles are equal when their coordinates are equal; the payload is
    content, not identity. Decoded and base64 views are recomputed from
    the payload on every access so that payload changes show up at once.

    Example:
        tile = Tile(1, 0, 2, png_bytes)
        str(tile)  # "Tile(x:0, y:2, z:1)"

    Attributes:
        z: Zoom level
        x: Column
        y: Row
        data: Image-encoded bytes, or None
    """

    def __init__(self, z: int, x: int, y: int, data: bytes | None = None) -> None:
        self.z = z
        self.x = x
        self.y = y
        self.data = data

    def decoded_image(self) -> Image.Image | None:
        """Decode the payload as an image.

        Returns:
            Decoded image, or None if there is no payload

        Raises:
            TileDecodeError: If the payload is not a decodable image
        """
        if self.data is None:
            return None
        try:
            image = Image.open(io.BytesIO(self.data))
            image.load()
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise TileDecodeError(str(self), str(e)) from e
        return image

    def base64_payload(self) -> str | None:
        """Get the payload as a base64 string, or None if there is no payload."""
        if self.data is None:
            return None
        return base64.b64encode(self.data).decode("ascii")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return (self.z, self.x, self.y) == (other.z, other.x, other.y)

    def __hash__(self) -> int:
        return hash((self.z, self.x, self.y))

    def __repr__(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"Tile(x:{self.x}, y:{self.y}, z:{self.z})"
