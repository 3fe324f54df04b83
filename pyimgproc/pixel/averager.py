"""
Running per-channel average of packed pixels.

A ``PixelAverager`` is a kernel-local struct holding one sum per channel and
the number of contributing pixels. Kernels create one per output pixel,
accumulate every neighbour that lies inside the image, then finalize it once.

    pa = PixelAverager(r=0, g=0, b=0, a=0, count=0)
    for dr, dc in window:
        pa_accumulate(pa, src, nx, ny, row + dr, col + dc)
    out[idx] = pa_finalize(pa)

Out-of-bounds coordinates are skipped silently and do not count. Finalizing
an averager with ``count == 0`` is a precondition violation.

Author: B.G.
"""

import taichi as ti

from .. import constants as cte
from .accessor import in_bounds, pixel_at
from .codec import alpha, blue, encode_pixel, green, red

PixelAverager = ti.types.struct(
    r=cte.ACC_TYPE_TI,
    g=cte.ACC_TYPE_TI,
    b=cte.ACC_TYPE_TI,
    a=cte.ACC_TYPE_TI,
    count=cte.ACC_TYPE_TI,
)


@ti.func
def pa_reset(pa: ti.template()):
    pa.r = 0
    pa.g = 0
    pa.b = 0
    pa.a = 0
    pa.count = 0


@ti.func
def pa_update(pa: ti.template(), pixel):
    pa.r += ti.cast(red(pixel), cte.ACC_TYPE_TI)
    pa.g += ti.cast(green(pixel), cte.ACC_TYPE_TI)
    pa.b += ti.cast(blue(pixel), cte.ACC_TYPE_TI)
    pa.a += ti.cast(alpha(pixel), cte.ACC_TYPE_TI)
    pa.count += 1


@ti.func
def pa_accumulate(
    pa: ti.template(),
    img: ti.template(),
    width: ti.i32,
    height: ti.i32,
    row: ti.i32,
    col: ti.i32,
):
    """Add pixel (row, col) of ``img`` to the running sums if it exists."""
    if in_bounds(row, col, width, height):
        pa_update(pa, pixel_at(img, width, row, col))


@ti.func
def pa_finalize(pa: ti.template()):
    """Truncated per-channel mean of everything accumulated so far."""
    return encode_pixel(
        pa.r // pa.count,
        pa.g // pa.count,
        pa.b // pa.count,
        pa.a // pa.count,
    )
