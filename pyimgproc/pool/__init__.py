"""
Memory pool for temporary Taichi fields.

Transforms copy host buffers into pooled fields, run their kernel and hand the
fields back. Reusing a field of the same dtype and shape avoids both the
allocation and a recompilation of kernels taking ``ti.template()`` arguments.

Usage:
    from pyimgproc import pool

    tmp = pool.get_temp_field(ti.u32, (n,))
    some_kernel(tmp.field)
    tmp.release()

Author: B.G.
"""

from .pool import FieldPool, TPField, get_temp_field, release_all, taichi_pool

__all__ = ["FieldPool", "TPField", "get_temp_field", "release_all", "taichi_pool"]
