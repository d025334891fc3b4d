"""Tiled imagery.

Key classes:
- Tile: An identified chunk of raster imagery with on-demand views
"""

from stylizer.layer.tile import Tile

__all__ = ["Tile"]
