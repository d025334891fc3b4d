"""Factory for rendering engine structures.

The style layer never instantiates render structures directly; it goes
through a ``StyleFactory`` so that every fill, stroke, mark and graphic is
built the same way.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from stylizer.domain.expression import Expression, Literal
from stylizer.render.model import (
    Fill,
    Graphic,
    LineSymbolizer,
    Mark,
    PointSymbolizer,
    PolygonSymbolizer,
    Rule,
    Stroke,
    Style,
    Symbolizer,
)


class StyleFactory:
    """Builds render structures.

    Example:
        factory = StyleFactory()
        mark = factory.create_mark("star", fill=factory.create_fill("#ff0000"))
    """

    def literal(self, value: Any) -> Literal:
        """Wrap a constant value."""
        return Literal(value)

    def create_graphic(self) -> Graphic:
        """Create an empty graphic with no marks."""
        return Graphic()

    def create_mark(
        self,
        well_known_name: str | Expression | None = None,
        fill: Fill | None = None,
        stroke: Stroke | None = None,
    ) -> Mark:
        """Create a mark.

        Args:
            well_known_name: Shape name
            fill: Interior paint
            stroke: Outline paint

        Returns:
            New Mark
        """
        return Mark(
            well_known_name=self._expression(well_known_name),
            fill=fill,
            stroke=stroke,
        )

    def create_fill(self, color: str | None = None, opacity: float | None = None) -> Fill:
        """Create a fill.

        Args:
            color: Hex color
            opacity: Opacity between 0 and 1

        Returns:
            New Fill
        """
        return Fill(color=self._expression(color), opacity=self._expression(opacity))

    def create_stroke(
        self,
        color: str | None = None,
        width: float | None = None,
        opacity: float | None = None,
        dash_array: Sequence[float] | None = None,
        line_cap: str | None = None,
        line_join: str | None = None,
    ) -> Stroke:
        """Create a stroke.

        Args:
            color: Hex color
            width: Width in pixels
            opacity: Opacity between 0 and 1
            dash_array: Dash pattern lengths
            line_cap: Line cap name
            line_join: Line join name

        Returns:
            New Stroke
        """
        return Stroke(
            color=self._expression(color),
            width=self._expression(width),
            opacity=self._expression(opacity),
            dash_array=list(dash_array) if dash_array is not None else None,
            line_cap=self._expression(line_cap),
            line_join=self._expression(line_join),
        )

    def create_symbolizer(self, kind: type[Symbolizer]) -> Symbolizer:
        """Create an empty symbolizer of the given variant.

        Line and polygon symbolizers start with an empty stroke or fill,
        the way a rendering engine's defaults would.
        """
        if kind is LineSymbolizer:
            return LineSymbolizer(stroke=Stroke())
        if kind is PolygonSymbolizer:
            return PolygonSymbolizer(fill=Fill())
        if kind is PointSymbolizer:
            return PointSymbolizer()
        return kind()

    def create_rule(self, symbolizers: Iterable[Symbolizer] = (), name: str | None = None) -> Rule:
        """Create a rule holding the given symbolizers."""
        return Rule(name=name, symbolizers=list(symbolizers))

    def create_style(self, rules: Iterable[Rule] = (), name: str | None = None) -> Style:
        """Create a style holding the given rules."""
        return Style(name=name, rules=list(rules))

    def _expression(self, value: Any) -> Expression | None:
        if value is None or isinstance(value, Expression):
            return value
        return self.literal(value)


style_factory = StyleFactory()
