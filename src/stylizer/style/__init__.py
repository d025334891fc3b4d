"""Style symbolizers.

Declarative style objects that write themselves into render rules.

Key classes:
- Shape: Point marker
- Stroke: Line and outline paint
- Fill: Polygon and interior paint
- Composite: Several symbolizers applied together

Key functions:
- to_hex: Normalize a color to ``#rrggbb``
"""

from stylizer.style.base import Composite, Symbolizer
from stylizer.style.color import to_hex, to_rgb
from stylizer.style.fill import Fill
from stylizer.style.shape import Shape, ShapeOptions
from stylizer.style.stroke import Stroke

__all__ = [
    "Composite",
    "Fill",
    "Shape",
    "ShapeOptions",
    "Stroke",
    "Symbolizer",
    "to_hex",
    "to_rgb",
]
