from enum import Enum
from typing import Callable, Union
from numpy.typing import NDArray

# Maps a unit step (scalar or array) to a warped unit step
UnitTransform = Callable[[Union[float, NDArray]], Union[float, NDArray]]


class Easing(str, Enum):
    """
    Step-warping functions applied to the local fraction between two stops.

    Member order defines the cyclic ``next()`` / ``prev()`` navigation.
    """
    LINEAR = "linear"
    IDENTITY = "identity"
    SMOOTH_STEP = "smooth_step"
    SMOOTHER_STEP = "smoother_step"
    EXPONENTIAL = "exponential"
    CUBIC = "cubic"
    BOUNCE = "bounce"
    CIRCULAR = "circular"
    SINE = "sine"
    PARABOLA = "parabola"
    GAIN1 = "gain1"
    GAIN2 = "gain2"
    EXPIMPULSE = "expimpulse"

    def next(self) -> "Easing":
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]

    def prev(self) -> "Easing":
        members = list(type(self))
        return members[(members.index(self) - 1) % len(members)]

    @classmethod
    def resolve(cls, easing: Union["Easing", str]) -> "Easing":
        if isinstance(easing, cls):
            return easing
        key = str(easing).lower()
        for member in cls:
            if member.value == key or member.name.lower() == key:
                return member
        raise ValueError(f"Unknown easing: {easing!r}")
