from .argb import (
    alpha_byte,
    argb_to_unit_rgb,
    compose_argb,
    compose_argb_bytes,
    decompose_argb,
    decompose_argb_bytes,
    mutate_argb,
    np_compose_argb,
    random_argb,
    with_alpha,
)

__all__ = [
    "alpha_byte",
    "argb_to_unit_rgb",
    "compose_argb",
    "compose_argb_bytes",
    "decompose_argb",
    "decompose_argb_bytes",
    "mutate_argb",
    "np_compose_argb",
    "random_argb",
    "with_alpha",
]
