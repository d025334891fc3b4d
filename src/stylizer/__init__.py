"""Stylizer - Declarative map symbology for rendering engines.

Stylizer lets callers describe map symbology (point markers, strokes, fills)
with small value objects and converts that description into the rule and
symbolizer structures a rendering engine draws from.

Example:
    >>> from stylizer.style import Shape
    >>> rule = Shape("red", 8, "star").with_stroke("navy", 0.5).create_rule()

Raster bands and image tiles are available as simple value objects from
``stylizer.raster`` and ``stylizer.layer``.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
