"""Raster reader for loading image rasters.

This module provides the RasterReader class for loading raster files
with Pillow and describing their channels as Band value objects.
"""

from pathlib import Path
from typing import ClassVar

import structlog
from PIL import Image, UnidentifiedImageError

from stylizer.exceptions import RasterReadError
from stylizer.raster.band import Band
from stylizer.raster.raster import Raster

logger = structlog.get_logger(__name__)


class RasterReader:
    """Loads raster files and extracts band metadata.

    Example:
        raster = RasterReader(Path("alki.tif")).read()
        for band in raster.bands:
            print(band, band.min_value, band.max_value)
    """

    # Channel name -> role label
    ROLES: ClassVar[dict[str, str]] = {
        "R": "RED_BAND",
        "G": "GREEN_BAND",
        "B": "BLUE_BAND",
        "A": "ALPHA_BAND",
        "L": "GRAY_INDEX",
        "I": "GRAY_INDEX",
        "F": "GRAY_INDEX",
        "P": "PALETTE_INDEX",
    }

    # Image mode -> sample type
    SAMPLE_TYPES: ClassVar[dict[str, str]] = {
        "1": "1BIT",
        "I": "32BI",
        "F": "32BF",
        "I;16": "16BU",
        "I;16B": "16BU",
        "I;16L": "16BU",
    }

    def __init__(self, raster_path: Path) -> None:
        """Initialize the raster reader.

        Args:
            raster_path: Path to the raster file
        """
        self._raster_path = raster_path

    def read(self) -> Raster:
        """Read the raster.

        Returns:
            Raster with bands in channel order

        Raises:
            RasterReadError: If the file is missing or not a readable image
        """
        if not self._raster_path.exists():
            raise RasterReadError(str(self._raster_path), "file not found")

        try:
            with Image.open(self._raster_path) as source:
                source.load()
                image = source.copy()
        except (UnidentifiedImageError, OSError) as e:
            raise RasterReadError(str(self._raster_path), str(e)) from e

        bands = self.describe_bands(image)
        logger.info(
            "Raster read",
            path=str(self._raster_path),
            mode=image.mode,
            bands=len(bands),
        )
        return Raster(path=self._raster_path, image=image, bands=bands)

    def describe_bands(self, image: Image.Image) -> list[Band]:
        """Describe each channel of an image.

        Args:
            image: Loaded image

        Returns:
            One Band per channel, in channel order
        """
        sample_type = self.SAMPLE_TYPES.get(image.mode, "8BUI")
        extrema = image.getextrema()
        if len(image.getbands()) == 1:
            extrema = (extrema,)

        return [
            Band(
                role=self.ROLES.get(name, "UNDEFINED"),
                min_value=float(low),
                max_value=float(high),
                sample_type=sample_type,
            )
            for name, (low, high) in zip(image.getbands(), extrema)
        ]
