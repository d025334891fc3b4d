"""Band value object.

A band describes one channel of a multi-band raster. Bands have no id of
their own: a band is identified by its position in the raster's band list,
which follows physical channel order.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Band:
    """Read-only description of one raster channel.

    Attributes:
        role: Channel role label supplied by the reader (e.g. "RED_BAND")
        min_value: Smallest sample value
        max_value: Largest sample value
        no_data: Sample value meaning "no data", if any
        unit: Unit of measure, if any
        scale: Scale applied to raw samples
        offset: Offset applied to raw samples
        sample_type: Sample type name (e.g. "8BUI", "32BF")
    """

    role: str
    min_value: float
    max_value: float
    no_data: float | None = None
    unit: str | None = None
    scale: float = 1.0
    offset: float = 0.0
    sample_type: str = "UNDEFINED"

    def __str__(self) -> str:
        return self.role
