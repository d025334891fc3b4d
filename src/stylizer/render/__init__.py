"""Rendering engine structures.

This module holds the rule tree a rendering engine consumes, the factory
that builds it, the graphic slot lookup used to write point-style
properties into any symbolizer variant, and an SLD writer.

Key classes:
- Rule, Style: Containers of symbolizers
- PointSymbolizer, LineSymbolizer, PolygonSymbolizer, TextSymbolizer,
  RasterSymbolizer: Symbolizer variants
- Graphic, Mark, Fill, Stroke: Paint and marker descriptors
- StyleFactory: Builds the structures above
- GraphicSlot, SlotOutcome: Result of a graphic slot lookup
- SldWriter: Encodes styles as SLD XML
"""

from stylizer.render.factory import StyleFactory, style_factory
from stylizer.render.locator import GraphicSlot, SlotOutcome, locate_graphic
from stylizer.render.model import (
    Fill,
    Graphic,
    GraphicHolder,
    LineSymbolizer,
    Mark,
    PointSymbolizer,
    PolygonSymbolizer,
    RasterSymbolizer,
    Rule,
    Stroke,
    Style,
    Symbolizer,
    TextSymbolizer,
)
from stylizer.render.sld import SldWriter

__all__ = [
    "Fill",
    "Graphic",
    "GraphicHolder",
    "GraphicSlot",
    "LineSymbolizer",
    "Mark",
    "PointSymbolizer",
    "PolygonSymbolizer",
    "RasterSymbolizer",
    "Rule",
    "SldWriter",
    "SlotOutcome",
    "Stroke",
    "Style",
    "StyleFactory",
    "Symbolizer",
    "TextSymbolizer",
    "locate_graphic",
    "style_factory",
]
