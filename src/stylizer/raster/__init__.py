"""Raster metadata.

Key classes:
- Band: Read-only description of one raster channel
- Raster: A loaded raster with its bands
- RasterReader: Loads rasters with Pillow
"""

from stylizer.raster.band import Band
from stylizer.raster.raster import Raster
from stylizer.raster.reader import RasterReader

__all__ = [
    "Band",
    "Raster",
    "RasterReader",
]
