"""Fill symbolizer for polygons and marker interiors."""

from typing import Any

from stylizer.render import model
from stylizer.style.base import Symbolizer
from stylizer.style.color import to_hex


class Fill(Symbolizer):
    """Interior paint with a color and opacity.

    Example:
        fill = Fill("wheat", 0.5)
    """

    targets = (model.PolygonSymbolizer,)

    def __init__(self, color: Any = None, opacity: float = 1.0) -> None:
        self.color = color
        self.opacity = opacity

    @property
    def color(self) -> str | None:
        """The color as a ``#rrggbb`` string, or None."""
        return self._color

    @color.setter
    def color(self, value: Any) -> None:
        self._color = to_hex(value)

    def create_fill(self) -> model.Fill:
        """Build the render fill for this Fill."""
        return self.factory.create_fill(color=self.color, opacity=self.opacity)

    def apply(self, symbolizer: model.Symbolizer) -> None:
        if isinstance(symbolizer, model.PolygonSymbolizer):
            symbolizer.fill = self.create_fill()

    def __str__(self) -> str:
        return self._build_string("Fill", {"color": self.color, "opacity": self.opacity})
