"""
Packed pixel codec for pyimgproc.

A pixel is a 32-bit unsigned integer laid out as 0xRRGGBBAA. The Taichi
functions below extract and pack channels inside kernels and compute the
integer-truncated averages used by the transforms. All averages drop the
fractional part: red 3 and red 4 average to 3.

The NumPy helpers ``pack_rgba`` and ``unpack_rgba`` do the same packing on the
host, for moving pixels in and out of (H, W, 4) uint8 arrays.

Author: B.G.
"""

import numpy as np
import taichi as ti

from .. import constants as cte


@ti.func
def decode_channel(pixel, which: ti.template()):
    """
    Extract one 8-bit channel from a packed pixel.

    Args:
        pixel: Packed pixel (u32)
        which: Channel identifier (cte.RED, cte.GREEN, cte.BLUE, cte.ALPHA)

    Returns:
        Channel value in [0, 255] as u32
    """
    shift = ti.static(cte.CHANNEL_SHIFTS[which])
    p = ti.cast(pixel, cte.PIXEL_TYPE_TI)
    return (p >> ti.u32(shift)) & ti.u32(cte.CHANNEL_MASK)


@ti.func
def red(pixel):
    return decode_channel(pixel, cte.RED)


@ti.func
def green(pixel):
    return decode_channel(pixel, cte.GREEN)


@ti.func
def blue(pixel):
    return decode_channel(pixel, cte.BLUE)


@ti.func
def alpha(pixel):
    return decode_channel(pixel, cte.ALPHA)


@ti.func
def encode_pixel(r, g, b, a):
    """
    Pack four channel values into one pixel.

    Values are not validated, each one must already lie in [0, 255].
    """
    return (
        (ti.cast(r, cte.PIXEL_TYPE_TI) << ti.u32(cte.RED_SHIFT))
        | (ti.cast(g, cte.PIXEL_TYPE_TI) << ti.u32(cte.GREEN_SHIFT))
        | (ti.cast(b, cte.PIXEL_TYPE_TI) << ti.u32(cte.BLUE_SHIFT))
        | ti.cast(a, cte.PIXEL_TYPE_TI)
    )


@ti.func
def average2(p1, p2):
    """Per-channel truncated average of two pixels, alpha included."""
    return encode_pixel(
        (red(p1) + red(p2)) // ti.u32(2),
        (green(p1) + green(p2)) // ti.u32(2),
        (blue(p1) + blue(p2)) // ti.u32(2),
        (alpha(p1) + alpha(p2)) // ti.u32(2),
    )


@ti.func
def average4(p1, p2, p3, p4):
    """Per-channel truncated average of four pixels, alpha included."""
    return encode_pixel(
        (red(p1) + red(p2) + red(p3) + red(p4)) // ti.u32(4),
        (green(p1) + green(p2) + green(p3) + green(p4)) // ti.u32(4),
        (blue(p1) + blue(p2) + blue(p3) + blue(p4)) // ti.u32(4),
        (alpha(p1) + alpha(p2) + alpha(p3) + alpha(p4)) // ti.u32(4),
    )


def pack_rgba(rgba):
    """
    Pack an (..., 4) uint8 RGBA array into packed uint32 pixels.

    Args:
        rgba: Array whose last axis holds red, green, blue and alpha

    Returns:
        numpy.ndarray: uint32 array with the last axis removed
    """
    rgba = np.asarray(rgba)
    if rgba.shape[-1] != 4:
        raise ValueError(f"Last axis must hold 4 channels, got shape {rgba.shape}")
    c = rgba.astype(cte.PIXEL_TYPE_NP)
    return (
        (c[..., cte.RED] << cte.RED_SHIFT)
        | (c[..., cte.GREEN] << cte.GREEN_SHIFT)
        | (c[..., cte.BLUE] << cte.BLUE_SHIFT)
        | (c[..., cte.ALPHA] << cte.ALPHA_SHIFT)
    ).astype(cte.PIXEL_TYPE_NP)


def unpack_rgba(pixels):
    """Inverse of ``pack_rgba``: append a channel axis of 4 uint8 values."""
    p = np.asarray(pixels, dtype=cte.PIXEL_TYPE_NP)
    channels = [(p >> shift) & cte.CHANNEL_MASK for shift in cte.CHANNEL_SHIFTS]
    return np.stack(channels, axis=-1).astype(np.uint8)
