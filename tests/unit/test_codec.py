"""
Unit tests for the packed pixel codec.

The codec functions are Taichi funcs, so each test drives them through a small
kernel.
"""
import numpy as np
import pytest
import taichi as ti

from pyimgproc import constants as cte
from pyimgproc.pixel.codec import (
    alpha,
    average2,
    average4,
    blue,
    decode_channel,
    encode_pixel,
    green,
    pack_rgba,
    red,
    unpack_rgba,
)


@ti.kernel
def _decode_all(p: ti.u32, out: ti.template()):
    out[0] = decode_channel(p, cte.RED)
    out[1] = decode_channel(p, cte.GREEN)
    out[2] = decode_channel(p, cte.BLUE)
    out[3] = decode_channel(p, cte.ALPHA)


@ti.kernel
def _shorthands(p: ti.u32, out: ti.template()):
    out[0] = red(p)
    out[1] = green(p)
    out[2] = blue(p)
    out[3] = alpha(p)


@ti.kernel
def _encode(r: ti.u32, g: ti.u32, b: ti.u32, a: ti.u32) -> ti.u32:
    return encode_pixel(r, g, b, a)


@ti.kernel
def _avg2(p1: ti.u32, p2: ti.u32) -> ti.u32:
    return average2(p1, p2)


@ti.kernel
def _avg4(p1: ti.u32, p2: ti.u32, p3: ti.u32, p4: ti.u32) -> ti.u32:
    return average4(p1, p2, p3, p4)


@pytest.fixture
def channel_field():
    return ti.field(dtype=ti.u32, shape=4)


@pytest.mark.unit
def test_decode_channels(channel_field):
    _decode_all(0xAABBCCDD, channel_field)
    assert list(channel_field.to_numpy()) == [0xAA, 0xBB, 0xCC, 0xDD]


@pytest.mark.unit
def test_shorthand_accessors_match_decode(channel_field):
    _shorthands(0x12345678, channel_field)
    assert list(channel_field.to_numpy()) == [0x12, 0x34, 0x56, 0x78]


@pytest.mark.unit
def test_encode_pixel():
    assert _encode(0xAA, 0xBB, 0xCC, 0xDD) == 0xAABBCCDD
    assert _encode(255, 255, 255, 255) == 0xFFFFFFFF
    assert _encode(0, 0, 0, 0) == 0


@pytest.mark.unit
def test_average2_truncates():
    # red 3 and 4 -> 3, every other channel identical
    assert _avg2(0x03102030, 0x04102030) == 0x03102030


@pytest.mark.unit
def test_average4_truncates():
    # red channels 3, 4, 4, 4 sum to 15 -> 3
    assert _avg4(0x03000000, 0x04000000, 0x04000000, 0x04000000) == 0x03000000


@pytest.mark.unit
def test_average_includes_alpha():
    assert _avg2(0x000000FF, 0x00000000) == 0x0000007F
    assert _avg4(0xFF0000FF, 0x00FF00FF, 0x0000FFFF, 0xFFFFFFFF) == 0x7F7F7FFF


@pytest.mark.unit
def test_average_of_white_has_no_overflow():
    assert _avg4(0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF) == 0xFFFFFFFF
    assert _avg2(0xFFFFFFFF, 0xFFFFFFFF) == 0xFFFFFFFF


@pytest.mark.unit
def test_pack_rgba():
    rgba = np.array([[[0xAA, 0xBB, 0xCC, 0xDD], [1, 2, 3, 4]]], dtype=np.uint8)
    packed = pack_rgba(rgba)
    assert packed.dtype == np.uint32
    assert packed.shape == (1, 2)
    assert packed[0, 0] == 0xAABBCCDD
    assert packed[0, 1] == 0x01020304


@pytest.mark.unit
def test_unpack_rgba():
    pixels = np.array([0xAABBCCDD, 0x01020304], dtype=np.uint32)
    rgba = unpack_rgba(pixels)
    assert rgba.dtype == np.uint8
    np.testing.assert_array_equal(rgba, [[0xAA, 0xBB, 0xCC, 0xDD], [1, 2, 3, 4]])


@pytest.mark.unit
def test_pack_rgba_rejects_wrong_channel_count():
    with pytest.raises(ValueError):
        pack_rgba(np.zeros((2, 2, 3), dtype=np.uint8))
