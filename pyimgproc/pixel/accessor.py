"""
Row-major indexing helpers for flat pixel fields.

Images live in 1D fields of ``width * height`` packed pixels; pixel (row, col)
sits at ``row * width + col``.

Author: B.G.
"""

import taichi as ti


@ti.func
def row_of(index: ti.i32, width: ti.i32) -> ti.i32:
    return index // width


@ti.func
def col_of(index: ti.i32, width: ti.i32) -> ti.i32:
    return index % width


@ti.func
def flat_index(row: ti.i32, col: ti.i32, width: ti.i32) -> ti.i32:
    return row * width + col


@ti.func
def in_bounds(row: ti.i32, col: ti.i32, width: ti.i32, height: ti.i32) -> ti.u1:
    return 0 <= row < height and 0 <= col < width


@ti.func
def pixel_at(img: ti.template(), width: ti.i32, row: ti.i32, col: ti.i32):
    """
    Read the pixel at (row, col). Not bounds checked: callers only use it
    where the coordinates are already known to be inside the image.
    """
    return img[row * width + col]
