from .color_stop import ColorStop
from .easing import EASING_FUNCTIONS, ease, get_easing_function
from .gradient import Gradient

__all__ = [
    "ColorStop",
    "EASING_FUNCTIONS",
    "ease",
    "get_easing_function",
    "Gradient",
]
