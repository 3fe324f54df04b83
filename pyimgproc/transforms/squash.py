"""
Downsampling by strided subsampling.

Output pixel (i, j) is a verbatim copy of source pixel (i * yfac, j * xfac).
No averaging takes place. With xfac=4 and yfac=2 the image

    XAAAYBBB
    AAAABBBB
    ZCCCWDDD
    CCCCDDDD

becomes

    XY
    ZW

Author: B.G.
"""

import taichi as ti

from ..pixel.accessor import col_of, pixel_at, row_of
from ._host import check_distinct, check_same_kind, resolve_dims, run_kernel


@ti.kernel
def squash_kernel(
    source_field: ti.template(),
    target_field: ti.template(),
    nx: ti.i32,
    out_nx: ti.i32,
    xfac: ti.i32,
    yfac: ti.i32,
):
    """
    Subsample ``source_field`` into ``target_field``.

    Args:
        source_field: Source pixels (nx * ny elements)
        target_field: Output pixels (out_nx * out_ny elements)
        nx: Number of columns in the source
        out_nx: Number of columns in the output
        xfac: Horizontal stride (> 0)
        yfac: Vertical stride (> 0)

    Every sampled coordinate must lie inside the source; this is not checked.
    """
    for idx in target_field:
        i = row_of(idx, out_nx)
        j = col_of(idx, out_nx)
        target_field[idx] = pixel_at(source_field, nx, i * yfac, j * xfac)


def squash(
    source,
    destination,
    xfac: int,
    yfac: int,
    nx: int | None = None,
    ny: int | None = None,
    out_nx: int | None = None,
    out_ny: int | None = None,
):
    """
    Shrink ``source`` into the pre-sized ``destination`` by integer strides.

    The destination size is chosen by the caller; every destination pixel
    samples the source at (row * yfac, col * xfac).

    Args:
        source: Source ``Image`` or flat Taichi field
        destination: Destination ``Image`` or flat Taichi field
        xfac: Horizontal factor (> 0)
        yfac: Vertical factor (> 0)
        nx: Source columns when passing Taichi fields
        ny: Source rows when passing Taichi fields
        out_nx: Destination columns when passing Taichi fields
        out_ny: Destination rows when passing Taichi fields

    Returns:
        The destination buffer, written in place

    Raises:
        ValueError: If a factor is not positive or a sample would fall outside
                    the source

    Example:
        src = Image(4, 4, data)
        dst = Image(2, 2)
        squash(src, dst, 2, 2)   # dst(1, 1) == src(2, 2)
    """
    check_same_kind(source, destination)
    nx, ny = resolve_dims(source, nx, ny, "source")
    out_nx, out_ny = resolve_dims(destination, out_nx, out_ny, "destination")
    check_distinct(source, destination)

    if xfac <= 0 or yfac <= 0:
        raise ValueError(f"Squash factors must be positive, got xfac={xfac}, yfac={yfac}")
    if (out_nx - 1) * xfac >= nx or (out_ny - 1) * yfac >= ny:
        raise ValueError(
            f"A {out_nx}x{out_ny} destination with factors ({xfac}, {yfac}) "
            f"samples outside the {nx}x{ny} source"
        )

    return run_kernel(squash_kernel, source, destination, nx, out_nx, xfac, yfac)


def squashed_size(nx: int, ny: int, xfac: int, yfac: int):
    """Largest (width, height) whose samples all fall inside an nx x ny source."""
    return (nx - 1) // xfac + 1, (ny - 1) // yfac + 1
