"""
Box blur with a bounds-clamped window.

Output pixel (row, col) takes the mean red, green and blue of every source
pixel in the square window [row - d, row + d] x [col - d, col + d] that lies
inside the image. Window cells outside the image are ignored rather than
clamped or wrapped, so a corner pixel with d=1 averages 4 pixels, not 9.
Means are truncated integers.

Alpha is never blurred: each output pixel keeps the alpha of the source pixel
at the same location.

Author: B.G.
"""

import taichi as ti

from ..pixel.accessor import col_of, row_of
from ..pixel.averager import PixelAverager, pa_accumulate, pa_finalize
from ..pixel.codec import alpha, blue, encode_pixel, green, red
from ._host import check_dims, check_distinct, check_same_kind, resolve_dims, run_kernel


@ti.kernel
def blur_kernel(
    source_field: ti.template(),
    target_field: ti.template(),
    nx: ti.i32,
    ny: ti.i32,
    blur_dist: ti.i32,
):
    """
    Box blur ``source_field`` into ``target_field``.

    Args:
        source_field: Source pixels (nx * ny elements)
        target_field: Output pixels (nx * ny elements)
        nx: Number of columns
        ny: Number of rows
        blur_dist: Half-width of the window (>= 0)
    """
    for idx in target_field:
        row = row_of(idx, nx)
        col = col_of(idx, nx)

        # a window wider than the image covers it whole
        d = ti.min(ti.max(blur_dist, 0), ti.max(nx, ny))

        pa = PixelAverager(r=0, g=0, b=0, a=0, count=0)
        for rr in range(ti.max(0, row - d), ti.min(ny, row + d + 1)):
            for cc in range(ti.max(0, col - d), ti.min(nx, col + d + 1)):
                pa_accumulate(pa, source_field, nx, ny, rr, cc)

        # the centre is always in bounds, so count >= 1
        mean = pa_finalize(pa)
        target_field[idx] = encode_pixel(
            red(mean), green(mean), blue(mean), alpha(source_field[idx])
        )


def blur(
    source,
    destination,
    blur_dist: int,
    nx: int | None = None,
    ny: int | None = None,
):
    """
    Blur ``source`` into the same-sized ``destination``.

    Args:
        source: Source ``Image`` or flat Taichi field
        destination: Destination of the same dimensions
        blur_dist: Window half-width; 0 copies the image unchanged
        nx: Columns when passing Taichi fields
        ny: Rows when passing Taichi fields

    Returns:
        The destination buffer, written in place

    Raises:
        ValueError: If ``blur_dist`` is negative or dimensions differ
    """
    if blur_dist < 0:
        raise ValueError(f"blur_dist must be non-negative, got {blur_dist}")

    check_same_kind(source, destination)
    nx, ny = resolve_dims(source, nx, ny, "source")
    check_dims(resolve_dims(destination, nx, ny, "destination"), (nx, ny), "blur")
    check_distinct(source, destination)

    # larger windows add nothing and would not fit the kernel's i32 argument
    blur_dist = min(blur_dist, max(nx, ny))

    return run_kernel(blur_kernel, source, destination, nx, ny, blur_dist)
