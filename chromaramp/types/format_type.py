# No dependencies
from enum import Enum
class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"

max_non_hue = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0
}

format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: float,
    FormatType.PERCENTAGE: float,
}

HUE_360 = 360.0


def scale_unit(value: float, fmt: FormatType):
    """Scale a unit-interval value to the range of ``fmt`` (INT is rounded half-up)."""
    scaled = value * max_non_hue[fmt]
    if fmt == FormatType.INT:
        return int(scaled + 0.5)
    return format_classes[fmt](scaled)
