from typing import Optional, TypeVar

import numpy as np

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default


def rng_or_default(rng: Optional[np.random.Generator]) -> np.random.Generator:
    """Return the injected generator, or a freshly seeded one when None."""
    return rng if rng is not None else np.random.default_rng()
