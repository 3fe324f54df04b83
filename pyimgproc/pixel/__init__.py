"""
Pixel-level building blocks for pyimgproc.

- codec: pack/unpack 0xRRGGBBAA pixels, truncated 2- and 4-way averages
- accessor: row-major indexing of flat pixel fields
- averager: per-output-pixel running average (PixelAverager)

Everything except ``pack_rgba``/``unpack_rgba`` is a Taichi function and can
only be called from inside a kernel.

Author: B.G.
"""

from .codec import (
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
from .accessor import col_of, flat_index, in_bounds, pixel_at, row_of
from .averager import (
    PixelAverager,
    pa_accumulate,
    pa_finalize,
    pa_reset,
    pa_update,
)

__all__ = [
    "decode_channel",
    "encode_pixel",
    "red",
    "green",
    "blue",
    "alpha",
    "average2",
    "average4",
    "pack_rgba",
    "unpack_rgba",
    "row_of",
    "col_of",
    "flat_index",
    "in_bounds",
    "pixel_at",
    "PixelAverager",
    "pa_reset",
    "pa_update",
    "pa_accumulate",
    "pa_finalize",
]
