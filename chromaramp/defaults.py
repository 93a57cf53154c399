"""Central place for chromaramp default settings."""

from .types.color_types import ColorSpaces
from .types.transform_types import Easing

# Fast math lookup tables (2 ** precision entries)
DEFAULT_FAST_MATH_PRECISION: int = 11
MIN_FAST_MATH_PRECISION: int = 0
MAX_FAST_MATH_PRECISION: int = 18

# Stops closer than this are treated as duplicates
STOP_POSITION_TOLERANCE: float = 1e-3

# Gradient defaults
DEFAULT_COLOR_SPACE: ColorSpaces = ColorSpaces.LUV
DEFAULT_EASING: Easing = Easing.SMOOTH_STEP
EMPTY_GRADIENT_COLOR: int = 0xFF000000  # opaque black

# Absolute-luminance spaces map sRGB white to this many cd/m^2
JZAZBZ_WHITE_LUMINANCE: float = 203.0
ICTCP_WHITE_LUMINANCE: float = 203.0

# Correlated color temperature search range (kelvin)
KELVIN_MIN: float = 1000.0
KELVIN_MAX: float = 40000.0
KELVIN_SEARCH_ITERATIONS: int = 24
