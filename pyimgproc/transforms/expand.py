"""
Upsampling to twice the width and height.

Output pixel (row, col) is anchored at source pixel (row // 2, col // 2). An
odd row reaches down to the next source row and an odd column reaches right
to the next source column, unless that neighbour would fall off the image, in
which case the step is dropped. The two steps select one of four cases:

    no step       -> copy of the anchor
    column step   -> average of anchor and its right neighbour
    row step      -> average of anchor and the pixel below
    both steps    -> average of the 2x2 block

Averages are per channel, truncated, and include alpha.

Author: B.G.
"""

import taichi as ti

from ..image import Image
from ..pixel.accessor import col_of, pixel_at, row_of
from ..pixel.codec import average2, average4
from ._host import check_dims, check_distinct, check_same_kind, resolve_dims, run_kernel


@ti.func
def _step(coord: ti.i32, anchor: ti.i32, n: ti.i32) -> ti.i32:
    """1 if an odd output coordinate should reach the next source cell."""
    res = 0
    if coord % 2 == 1 and anchor + 1 < n:
        res = 1
    return res


@ti.kernel
def expand_kernel(
    source_field: ti.template(),
    target_field: ti.template(),
    nx: ti.i32,
    ny: ti.i32,
):
    """
    Double the resolution of ``source_field`` into ``target_field``.

    Args:
        source_field: Source pixels (nx * ny elements)
        target_field: Output pixels (2*nx * 2*ny elements)
        nx: Number of columns in the source
        ny: Number of rows in the source
    """
    out_nx = 2 * nx

    for idx in target_field:
        row = row_of(idx, out_nx)
        col = col_of(idx, out_nx)
        r = row // 2
        c = col // 2

        dr = _step(row, r, ny)
        dc = _step(col, c, nx)

        anchor = pixel_at(source_field, nx, r, c)
        out = anchor
        if dr == 1 and dc == 1:
            out = average4(
                anchor,
                pixel_at(source_field, nx, r, c + 1),
                pixel_at(source_field, nx, r + 1, c),
                pixel_at(source_field, nx, r + 1, c + 1),
            )
        elif dr == 1:
            out = average2(anchor, pixel_at(source_field, nx, r + 1, c))
        elif dc == 1:
            out = average2(anchor, pixel_at(source_field, nx, r, c + 1))

        target_field[idx] = out


def expand(source, destination, nx: int | None = None, ny: int | None = None):
    """
    Upsample ``source`` into a destination of twice its width and height.

    Args:
        source: Source ``Image`` or flat Taichi field
        destination: Destination of size (2 * width, 2 * height)
        nx: Source columns when passing Taichi fields
        ny: Source rows when passing Taichi fields

    Returns:
        The destination buffer, written in place

    Example:
        src = Image(2, 2, [0xFF0000FF, 0x00FF00FF, 0x0000FFFF, 0xFFFFFFFF])
        dst = Image.blank_like(src, 2, 2)
        expand(src, dst)
    """
    check_same_kind(source, destination)
    nx, ny = resolve_dims(source, nx, ny, "source")
    expected = (2 * nx, 2 * ny)
    out_nx = out_ny = None
    if not isinstance(destination, Image):
        out_nx, out_ny = expected
    check_dims(resolve_dims(destination, out_nx, out_ny, "destination"), expected, "expand")
    check_distinct(source, destination)

    return run_kernel(expand_kernel, source, destination, nx, ny)
