"""
Field pool implementation.

Fields are bucketed by ``(dtype, shape)``. A bucket holds every field ever
created for that key, each wrapped in a ``TPField`` that tracks whether it is
currently lent out.

Author: B.G.
"""

import taichi as ti


class TPField:
    """Pooled Taichi field handle."""

    def __init__(self, dtype, shape, pool):
        self.dtype = dtype
        self.shape = shape
        self.field = ti.field(dtype=dtype, shape=shape)
        self.in_use = False
        self._pool = pool

    def release(self):
        """Hand the field back to its pool."""
        self._pool.release(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


class FieldPool:
    """
    Cache of temporary fields keyed by dtype and shape.

    Fields are never freed, only marked available again. A pool is tied to the
    Taichi runtime that created its fields: call ``clear()`` after a new
    ``ti.init``.
    """

    def __init__(self):
        self._buckets = {}

    @staticmethod
    def _key(dtype, shape):
        if isinstance(shape, int):
            shape = (shape,)
        return (dtype, tuple(shape))

    def get_field(self, dtype, shape):
        """Return an available field of the given dtype and shape, creating one if needed."""
        key = self._key(dtype, shape)
        bucket = self._buckets.setdefault(key, [])
        for tpf in bucket:
            if not tpf.in_use:
                tpf.in_use = True
                return tpf

        tpf = TPField(dtype, key[1], self)
        tpf.in_use = True
        bucket.append(tpf)
        return tpf

    def release(self, tpf):
        if not tpf.in_use:
            raise ValueError("Field released twice")
        tpf.in_use = False

    def release_all(self):
        for bucket in self._buckets.values():
            for tpf in bucket:
                tpf.in_use = False

    def clear(self):
        self._buckets = {}

    def stats(self):
        """Return (total, in_use) field counts."""
        total = sum(len(b) for b in self._buckets.values())
        in_use = sum(tpf.in_use for b in self._buckets.values() for tpf in b)
        return total, in_use


taichi_pool = FieldPool()


def get_temp_field(dtype, shape):
    return taichi_pool.get_field(dtype, shape)


def release_all():
    taichi_pool.release_all()
