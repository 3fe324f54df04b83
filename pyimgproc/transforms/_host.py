"""
Host-side plumbing shared by the transform wrappers.

Each public transform accepts either two ``Image`` objects or two flat Taichi
fields. For images, the pixels are uploaded into pooled fields, the kernel
runs, and the result is written back into ``destination.data`` in place. For
fields, the kernel runs on them directly.

Author: B.G.
"""

import numpy as np

from .. import constants as cte
from .. import pool
from ..image import Image


def resolve_dims(buf, nx=None, ny=None, name="source"):
    """
    Return (nx, ny) for an Image or a flat Taichi field.

    Args:
        buf: ``Image`` or 1D Taichi field
        nx: Number of columns, required for fields
        ny: Number of rows, required for fields
        name: Argument name used in error messages

    Raises:
        TypeError: If ``buf`` is neither an Image nor a Taichi field
        ValueError: If field dimensions are missing or inconsistent
    """
    if isinstance(buf, Image):
        return buf.width, buf.height

    if hasattr(buf, "to_numpy"):
        if len(buf.shape) != 1:
            raise ValueError(f"{name} Taichi field must be 1D (row-major pixels)")
        if nx is None or ny is None:
            raise ValueError(f"Width and height must be provided for {name} Taichi field")
        if nx <= 0 or ny <= 0:
            raise ValueError(f"{name} dimensions must be positive, got {nx}x{ny}")
        if nx * ny != buf.shape[0]:
            raise ValueError(
                f"{name} width * height ({nx * ny}) does not match field size ({buf.shape[0]})"
            )
        return nx, ny

    raise TypeError(f"{name} must be a pyimgproc Image or a Taichi field")


def check_distinct(source, destination):
    """Reject calls where the destination aliases the source."""
    if source is destination:
        raise ValueError("source and destination must be distinct buffers")
    if isinstance(source, Image) and isinstance(destination, Image):
        if np.shares_memory(source.data, destination.data):
            raise ValueError("source and destination must not share memory")


def check_same_kind(source, destination):
    if isinstance(source, Image) != isinstance(destination, Image):
        raise TypeError("source and destination must both be Images or both be Taichi fields")


def check_dims(actual, expected, transform):
    if tuple(actual) != tuple(expected):
        raise ValueError(
            f"{transform} destination must be {expected[0]}x{expected[1]}, "
            f"got {actual[0]}x{actual[1]}"
        )


def run_kernel(kernel, source, destination, *args):
    """
    Run ``kernel(source_field, target_field, *args)`` on images or fields.

    Images go through pooled temporary fields; the destination image data is
    overwritten in place.
    """
    if not isinstance(source, Image):
        kernel(source, destination, *args)
        return destination

    with pool.get_temp_field(cte.PIXEL_TYPE_TI, (source.data.size,)) as src, \
            pool.get_temp_field(cte.PIXEL_TYPE_TI, (destination.data.size,)) as dst:
        src.field.from_numpy(source.data)
        kernel(src.field, dst.field, *args)
        destination.data[:] = dst.field.to_numpy()

    return destination
