import numpy as np
import pytest

from chromaramp.colors.argb import (
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
from chromaramp.samples.colors import BLUE, GRAY, RED, WHITE
from chromaramp.types.format_type import FormatType


def test_compose_from_unit_floats():
    assert compose_argb(1.0, 0.0, 0.0) == RED
    assert compose_argb(0.0, 0.0, 1.0) == BLUE
    # 0.5 * 255 rounds half-up to 128
    assert compose_argb(0.5, 0.5, 0.5) == GRAY


def test_compose_clamps():
    assert compose_argb(2.0, -1.0, 0.5, alpha=0.0) == 0x00FF0080
    assert compose_argb_bytes(300, -5, 128, 999) == 0xFFFF0080


def test_decompose_formats():
    color = 0x80FF8000
    assert decompose_argb(color, FormatType.INT) == (128, 255, 128, 0)
    assert decompose_argb(color, FormatType.FLOAT) == pytest.approx((128 / 255, 1.0, 128 / 255, 0.0))
    assert decompose_argb(color, "percentage") == pytest.approx((100 * 128 / 255, 100.0, 100 * 128 / 255, 0.0))


def test_signed_ints_are_masked():
    assert decompose_argb_bytes(-1) == (255, 255, 255, 255)
    assert alpha_byte(-16777216) == 255


def test_unit_rgb():
    np.testing.assert_array_equal(argb_to_unit_rgb(RED), [1.0, 0.0, 0.0])
    np.testing.assert_allclose(argb_to_unit_rgb(GRAY), [128 / 255] * 3)


def test_with_alpha():
    assert with_alpha(RED, 0x40) == 0x40FF0000
    assert alpha_byte(with_alpha(WHITE, 0)) == 0


def test_np_compose_matches_scalar(rng):
    rgb = rng.random((50, 3)) * 1.2 - 0.1
    alpha = rng.random(50)
    expected = [compose_argb(r, g, b, a) for (r, g, b), a in zip(rgb, alpha)]
    np.testing.assert_array_equal(np_compose_argb(rgb, alpha), expected)


def test_random_is_opaque_and_seeded():
    first = [random_argb(np.random.default_rng(7)) for _ in range(3)]
    assert len(set(first)) == 1
    rng = np.random.default_rng(7)
    colors = [random_argb(rng) for _ in range(20)]
    assert all(alpha_byte(c) == 255 for c in colors)
    assert len(set(colors)) > 1


def test_mutate_moves_each_channel_by_amount(rng):
    for _ in range(20):
        a, r, g, b = decompose_argb_bytes(mutate_argb(0x7F808080, 10, rng))
        assert a == 0x7F
        assert {r, g, b} <= {118, 138}


def test_mutate_clamps(rng):
    for _ in range(20):
        _, r, g, b = decompose_argb_bytes(mutate_argb(WHITE, 20, rng))
        assert {r, g, b} <= {235, 255}
