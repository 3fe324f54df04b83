"""
Color channel rotation.

Each pixel's red, green and blue values move one slot along: the new red is
the old blue, the new green the old red and the new blue the old green. Alpha
stays put, so 0xAABBCCDD becomes 0xCCAABBDD. Three rotations are the identity.

Author: B.G.
"""

import taichi as ti

from ..pixel.codec import alpha, blue, encode_pixel, green, red
from ._host import check_dims, check_distinct, check_same_kind, resolve_dims, run_kernel


@ti.kernel
def color_rotate_kernel(source_field: ti.template(), target_field: ti.template()):
    for idx in source_field:
        p = source_field[idx]
        target_field[idx] = encode_pixel(blue(p), red(p), green(p), alpha(p))


def color_rotate(source, destination, nx: int | None = None, ny: int | None = None):
    """
    Rotate the RGB channels of every pixel of ``source`` into ``destination``.

    Args:
        source: Source ``Image`` or flat Taichi field
        destination: Destination of the same dimensions
        nx: Columns when passing Taichi fields
        ny: Rows when passing Taichi fields

    Returns:
        The destination buffer, written in place
    """
    check_same_kind(source, destination)
    dims = resolve_dims(source, nx, ny, "source")
    check_dims(resolve_dims(destination, nx, ny, "destination"), dims, "color_rotate")
    check_distinct(source, destination)

    return run_kernel(color_rotate_kernel, source, destination)
