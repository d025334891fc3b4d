"""Stroke symbolizer for lines and marker outlines."""

import re
from collections.abc import Sequence
from typing import Any

from stylizer.exceptions import InvalidDashPatternError
from stylizer.render import model
from stylizer.style.base import Symbolizer
from stylizer.style.color import to_hex

_DASH_SEPARATOR = re.compile(r"[\s,]+")


class Stroke(Symbolizer):
    """Outline paint with color, width, dash pattern, cap and join.

    A Stroke styles line symbolizers on its own and is also the outline
    descriptor owned by a Shape.

    Example:
        stroke = Stroke("#333333", 2, dash=[5, 2], cap="round")
    """

    targets = (model.LineSymbolizer,)

    def __init__(
        self,
        color: Any = "#000000",
        width: float = 1.0,
        dash: Sequence[float] | str | None = None,
        cap: str | None = None,
        join: str | None = None,
        opacity: float = 1.0,
    ) -> None:
        self.color = color
        self.width = width
        self.dash = dash
        self.cap = cap
        self.join = join
        self.opacity = opacity

    @property
    def color(self) -> str | None:
        """The color as a ``#rrggbb`` string."""
        return self._color

    @color.setter
    def color(self, value: Any) -> None:
        self._color = to_hex(value)

    def dash_array(self) -> list[float] | None:
        """Get the dash pattern as a list of lengths.

        Returns:
            Dash lengths, or None for a solid line

        Raises:
            InvalidDashPatternError: If a length is not a number
        """
        if self.dash is None:
            return None
        try:
            if isinstance(self.dash, str):
                return [float(p) for p in _DASH_SEPARATOR.split(self.dash.strip()) if p]
            return [float(d) for d in self.dash]
        except (TypeError, ValueError) as e:
            raise InvalidDashPatternError(self.dash, str(e)) from e

    def create_stroke(self) -> model.Stroke:
        """Build the render stroke for this Stroke."""
        return self.factory.create_stroke(
            color=self.color,
            width=self.width,
            opacity=self.opacity,
            dash_array=self.dash_array(),
            line_cap=self.cap,
            line_join=self.join,
        )

    def apply(self, symbolizer: model.Symbolizer) -> None:
        if isinstance(symbolizer, model.LineSymbolizer):
            symbolizer.stroke = self.create_stroke()

    def __str__(self) -> str:
        return self._build_string(
            "Stroke",
            {"color": self.color, "width": self.width, "dash": self.dash,
             "cap": self.cap, "join": self.join},
        )
