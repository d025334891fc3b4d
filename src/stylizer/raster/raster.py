"""Raster handle returned by the reader."""

from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from stylizer.raster.band import Band


@dataclass
class Raster:
    """A raster image with its bands.

    Attributes:
        path: Source file
        image: Decoded image
        bands: Bands in physical channel order
    """

    path: Path
    image: Image.Image = field(repr=False)
    bands: list[Band] = field(default_factory=list)

    @property
    def size(self) -> tuple[int, int]:
        """Get (width, height) in pixels."""
        return self.image.size

    @property
    def band_count(self) -> int:
        return len(self.bands)
