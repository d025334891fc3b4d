"""Shape symbolizer for point markers.

A Shape is a well-known marker (circle, square, triangle, star, cross, x)
with a fill color, size, optional outline and optional rotation.

There are three ways to build one:

- ``Shape("#ff0000", 8, "circle", 0.55, 45)``: positional, opacity
  defaults to 1.0 and rotation to 0
- ``Shape.from_options({"type": "star", "size": 4, "color": "#ff00ff"})``:
  named fields, unknown names are ignored, opacity defaults to 0.0
- ``Shape()``: all defaults, no color, opacity 0.0
"""

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict

from stylizer.domain.expression import resolve_rotation
from stylizer.render import model
from stylizer.render.locator import locate_graphic
from stylizer.style.base import Symbolizer
from stylizer.style.color import to_hex
from stylizer.style.fill import Fill
from stylizer.style.stroke import Stroke

logger = structlog.get_logger(__name__)

_UNSET: Any = object()


class ShapeOptions(BaseModel):
    """Named fields accepted by ``Shape.from_options``.

    Keys that are not fields here are dropped.
    """

    model_config = ConfigDict(extra="ignore", arbitrary_types_allowed=True)

    color: Any = None
    size: float = 6.0
    type: str = "circle"
    stroke: Stroke | None = None
    rotation: Any = None
    opacity: float = 0.0


class Shape(Symbolizer):
    """A point marker.

    The shape type is not checked against the known marker names; unknown
    names are passed on to the renderer unchanged.

    Attributes:
        size: Marker size in pixels
        type: Well-known marker name
        stroke: Outline, None for no outline
        rotation: Angle in degrees, an Expression, or None
        opacity: Fill opacity (0 transparent, 1 opaque)
    """

    targets = (model.PointSymbolizer,)

    def __init__(
        self,
        color: Any = _UNSET,
        size: float = 6.0,
        type: str = "circle",
        opacity: float | None = None,
        rotation: Any = None,
    ) -> None:
        if color is _UNSET:
            color = None
            default_opacity, default_rotation = 0.0, None
        else:
            default_opacity, default_rotation = 1.0, 0

        self.color = color
        self.size = float(size)
        self.type = type
        self.opacity = default_opacity if opacity is None else opacity
        self.rotation = default_rotation if rotation is None else rotation
        self.stroke: Stroke | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None, **kwargs: Any) -> "Shape":
        """Create a Shape from named fields.

        Args:
            options: Mapping of field names to values
            **kwargs: Additional fields, overriding ``options``

        Returns:
            New Shape
        """
        opts = ShapeOptions.model_validate({**(options or {}), **kwargs})
        shape = cls()
        shape.color = opts.color
        shape.size = opts.size
        shape.type = opts.type
        shape.stroke = opts.stroke
        shape.rotation = opts.rotation
        shape.opacity = opts.opacity
        return shape

    @property
    def color(self) -> str | None:
        """The color as a ``#rrggbb`` string, or None."""
        return self._color

    @color.setter
    def color(self, value: Any) -> None:
        self._color = to_hex(value)

    def with_stroke(
        self,
        color: Any = "#000000",
        width: float = 1.0,
        dash: Any = None,
        cap: str | None = None,
        join: str | None = None,
    ) -> "Shape":
        """Replace the outline of this Shape.

        Args:
            color: Outline color
            width: Outline width
            dash: Dash pattern
            cap: Line cap (round, butt, square)
            join: Line join (mitre, round, bevel)

        Returns:
            This Shape
        """
        self.stroke = Stroke(color, width, dash, cap, join)
        return self

    def apply(self, symbolizer: model.Symbolizer) -> None:
        """Write this Shape into the graphic slot of a render symbolizer.

        Sets the graphic size, writes the rotation if there is one, and
        replaces any existing marks with a single new mark. Symbolizers
        without a graphic slot are left unchanged.

        Args:
            symbolizer: Point, text, polygon or line symbolizer
        """
        slot = locate_graphic(symbolizer, self.factory)
        if not slot.supported or slot.graphic is None:
            return

        graphic = slot.graphic
        graphic.size = self.factory.literal(self.size)

        rotation = resolve_rotation(self.rotation)
        expression = rotation.to_expression()
        if expression is not None:
            graphic.rotation = expression
        logger.debug(
            "Shape applied",
            variant=type(symbolizer).__name__,
            slot=slot.outcome.name,
            rotation=rotation.kind.name,
        )

        graphic.symbols.clear()
        graphic.symbols.append(self.create_mark())

    def create_mark(self) -> model.Mark:
        """Build the render mark for this Shape.

        Returns:
            Mark with fill from color and opacity (None without a color),
            stroke from the outline (None without one), and the shape type
            as its well-known name
        """
        fill = Fill(self.color, self.opacity).create_fill() if self.color is not None else None
        stroke = self.stroke.create_stroke() if self.stroke is not None else None
        return self.factory.create_mark(self.type, fill=fill, stroke=stroke)

    def __str__(self) -> str:
        return self._build_string(
            "Shape", {"color": self.color, "size": self.size, "type": self.type}
        )
