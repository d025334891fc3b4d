"""Graphic slot lookup.

Point-style properties (size, rotation, marks) live in a different place for
each symbolizer variant:

| Variant             | Slot                    |
|---------------------|-------------------------|
| PointSymbolizer     | own graphic             |
| TextSymbolizer      | own graphic             |
| PolygonSymbolizer   | fill's graphic fill     |
| LineSymbolizer      | stroke's graphic stroke |
| anything else       | unsupported             |

Missing slots are created. Unsupported variants are reported through
``SlotOutcome.UNSUPPORTED`` rather than an exception; callers treat them as
a no-op.
"""

from dataclasses import dataclass
from enum import Enum, auto

import structlog

from stylizer.render.factory import StyleFactory, style_factory
from stylizer.render.model import Graphic, GraphicHolder, Symbolizer

logger = structlog.get_logger(__name__)


class SlotOutcome(Enum):
    """Result of a graphic slot lookup."""

    FOUND = auto()
    CREATED = auto()
    UNSUPPORTED = auto()


@dataclass(frozen=True)
class GraphicSlot:
    """A located graphic slot.

    Attributes:
        outcome: Whether the slot existed, was created, or is unsupported
        graphic: The graphic, None when unsupported
    """

    outcome: SlotOutcome
    graphic: Graphic | None = None

    @property
    def supported(self) -> bool:
        return self.outcome is not SlotOutcome.UNSUPPORTED


def locate_graphic(symbolizer: Symbolizer, factory: StyleFactory | None = None) -> GraphicSlot:
    """Find or create the graphic slot of a symbolizer.

    Args:
        symbolizer: Target symbolizer of any variant
        factory: Factory for new graphics (module default if None)

    Returns:
        GraphicSlot with the graphic, or an UNSUPPORTED outcome
    """
    if not isinstance(symbolizer, GraphicHolder):
        logger.debug("No graphic slot", variant=type(symbolizer).__name__)
        return GraphicSlot(SlotOutcome.UNSUPPORTED)

    factory = factory or style_factory
    graphic, created = symbolizer.graphic_slot(factory.create_graphic)
    outcome = SlotOutcome.CREATED if created else SlotOutcome.FOUND
    return GraphicSlot(outcome, graphic)
