"""Rendering engine structures.

This module defines the mutable rule tree a rendering engine draws from.
Style objects write into these structures; nothing here knows about the
style layer.

- Fill, Stroke: Paint descriptors (with optional graphic fill/stroke)
- Mark, Graphic: Point marker descriptors
- Symbolizer variants: PointSymbolizer, LineSymbolizer, PolygonSymbolizer,
  TextSymbolizer, RasterSymbolizer
- Rule, Style: Containers of symbolizers

Point, text, polygon and line symbolizers each expose a graphic slot that
point-style properties are written into (see ``GraphicHolder``). Raster
symbolizers have none.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, TypeVar, runtime_checkable

from stylizer.domain.expression import Expression


@dataclass
class Graphic:
    """A point graphic: a list of marks drawn at a size and rotation.

    Attributes:
        size: Size expression in pixels
        rotation: Rotation expression in degrees (None when not rotated)
        opacity: Opacity expression
        symbols: Marks drawn for this graphic, in order
    """

    size: Expression | None = None
    rotation: Expression | None = None
    opacity: Expression | None = None
    symbols: list["Mark"] = field(default_factory=list)


@dataclass
class Fill:
    """Interior paint.

    Attributes:
        color: Color expression (hex string literal)
        opacity: Opacity expression
        graphic_fill: Graphic repeated to fill an area
    """

    color: Expression | None = None
    opacity: Expression | None = None
    graphic_fill: Graphic | None = None


@dataclass
class Stroke:
    """Outline paint.

    Attributes:
        color: Color expression (hex string literal)
        width: Width expression in pixels
        opacity: Opacity expression
        dash_array: Dash pattern lengths
        line_cap: Line cap expression (butt, round, square)
        line_join: Line join expression (mitre, round, bevel)
        graphic_stroke: Graphic repeated along a line
    """

    color: Expression | None = None
    width: Expression | None = None
    opacity: Expression | None = None
    dash_array: list[float] | None = None
    line_cap: Expression | None = None
    line_join: Expression | None = None
    graphic_stroke: Graphic | None = None


@dataclass
class Mark:
    """A single shape descriptor.

    Attributes:
        well_known_name: Shape name expression (circle, square, ...)
        fill: Interior paint, None for no fill
        stroke: Outline paint, None for no outline
    """

    well_known_name: Expression | None = None
    fill: Fill | None = None
    stroke: Stroke | None = None


GraphicFactory = Callable[[], Graphic]


@runtime_checkable
class GraphicHolder(Protocol):
    """A symbolizer with a slot for point-style graphics."""

    def graphic_slot(self, create: GraphicFactory) -> tuple[Graphic, bool]:
        """Get the graphic slot, creating it if absent.

        Args:
            create: Factory used when the slot is empty

        Returns:
            Tuple of (graphic, created)
        """
        ...


@dataclass
class Symbolizer:
    """Base class for symbolizer variants.

    Attributes:
        name: Optional symbolizer name
        geometry: Optional geometry property name
    """

    name: str | None = None
    geometry: str | None = None


@dataclass
class PointSymbolizer(Symbolizer):
    """Draws a graphic at each point."""

    graphic: Graphic | None = None

    def graphic_slot(self, create: GraphicFactory) -> tuple[Graphic, bool]:
        if self.graphic is None:
            self.graphic = create()
            return self.graphic, True
        return self.graphic, False


@dataclass
class TextSymbolizer(Symbolizer):
    """Draws a label, optionally behind a graphic."""

    label: Expression | None = None
    fill: Fill | None = None
    graphic: Graphic | None = None

    def graphic_slot(self, create: GraphicFactory) -> tuple[Graphic, bool]:
        if self.graphic is None:
            self.graphic = create()
            return self.graphic, True
        return self.graphic, False


@dataclass
class PolygonSymbolizer(Symbolizer):
    """Fills and outlines polygons. Graphics go into the fill's graphic fill."""

    fill: Fill | None = None
    stroke: Stroke | None = None

    def graphic_slot(self, create: GraphicFactory) -> tuple[Graphic, bool]:
        if self.fill is None:
            self.fill = Fill()
        if self.fill.graphic_fill is None:
            self.fill.graphic_fill = create()
            return self.fill.graphic_fill, True
        return self.fill.graphic_fill, False


@dataclass
class LineSymbolizer(Symbolizer):
    """Strokes lines. Graphics go into the stroke's graphic stroke."""

    stroke: Stroke | None = None

    def graphic_slot(self, create: GraphicFactory) -> tuple[Graphic, bool]:
        if self.stroke is None:
            self.stroke = Stroke()
        if self.stroke.graphic_stroke is None:
            self.stroke.graphic_stroke = create()
            return self.stroke.graphic_stroke, True
        return self.stroke.graphic_stroke, False


@dataclass
class RasterSymbolizer(Symbolizer):
    """Draws raster coverages. Has no graphic slot."""

    opacity: Expression | None = None


S = TypeVar("S", bound=Symbolizer)


@dataclass
class Rule:
    """A group of symbolizers drawn under a shared condition.

    Attributes:
        name: Optional rule name
        symbolizers: Symbolizers in drawing order
    """

    name: str | None = None
    symbolizers: list[Symbolizer] = field(default_factory=list)

    def symbolizers_of(self, kind: type[S]) -> list[S]:
        """Get the symbolizers of one variant, in order.

        Args:
            kind: Symbolizer class to select

        Returns:
            Matching symbolizers
        """
        return [s for s in self.symbolizers if isinstance(s, kind)]


@dataclass
class Style:
    """A named list of rules.

    Attributes:
        name: Style name
        rules: Rules in drawing order
    """

    name: str | None = None
    rules: list[Rule] = field(default_factory=list)
