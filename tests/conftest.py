"""
Pytest configuration and fixtures for the pyimgproc test suite.

This file initialises Taichi once for the session and provides sample images
plus plain-Python reference implementations of the transforms, used as
oracles by the kernel tests.
"""
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("unit", "integration", "importtest", "slow", "gpu"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")

    import taichi as ti
    from pyimgproc import pool

    ti.init(arch=ti.cpu, offline_cache=False)
    pool.taichi_pool.clear()


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


def random_pixels(nx, ny, seed=42):
    """Random packed pixels of shape (ny, nx)."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, 2**32, size=(ny, nx), dtype=np.uint32)


class ReferenceTransforms:
    """Straightforward per-pixel Python versions of every transform."""

    @staticmethod
    def channels(p):
        p = int(p)
        return ((p >> 24) & 0xFF, (p >> 16) & 0xFF, (p >> 8) & 0xFF, p & 0xFF)

    @staticmethod
    def pack(r, g, b, a):
        return (r << 24) | (g << 16) | (b << 8) | a

    @classmethod
    def average(cls, *pixels):
        chans = [cls.channels(p) for p in pixels]
        return cls.pack(*[sum(c[k] for c in chans) // len(chans) for k in range(4)])

    @classmethod
    def squash(cls, grid, out_nx, out_ny, xfac, yfac):
        out = np.zeros((out_ny, out_nx), dtype=np.uint32)
        for i in range(out_ny):
            for j in range(out_nx):
                out[i, j] = grid[i * yfac, j * xfac]
        return out

    @classmethod
    def color_rotate(cls, grid):
        out = np.zeros_like(grid)
        for idx, p in np.ndenumerate(grid):
            r, g, b, a = cls.channels(p)
            out[idx] = cls.pack(b, r, g, a)
        return out

    @classmethod
    def blur(cls, grid, d):
        ny, nx = grid.shape
        out = np.zeros_like(grid)
        for row in range(ny):
            for col in range(nx):
                sums = [0, 0, 0]
                count = 0
                for rr in range(row - d, row + d + 1):
                    for cc in range(col - d, col + d + 1):
                        if 0 <= rr < ny and 0 <= cc < nx:
                            r, g, b, _ = cls.channels(grid[rr, cc])
                            sums[0] += r
                            sums[1] += g
                            sums[2] += b
                            count += 1
                a = cls.channels(grid[row, col])[3]
                out[row, col] = cls.pack(sums[0] // count, sums[1] // count, sums[2] // count, a)
        return out

    @classmethod
    def expand(cls, grid):
        ny, nx = grid.shape
        out = np.zeros((2 * ny, 2 * nx), dtype=np.uint32)
        for row in range(2 * ny):
            for col in range(2 * nx):
                r, c = row // 2, col // 2
                right_edge = c + 1 >= nx
                bottom_edge = r + 1 >= ny
                p = grid[r, c]
                if row % 2 == 0 and col % 2 == 0:
                    v = p
                elif row % 2 == 0:
                    v = p if right_edge else cls.average(p, grid[r, c + 1])
                elif col % 2 == 0:
                    v = p if bottom_edge else cls.average(p, grid[r + 1, c])
                elif not right_edge and not bottom_edge:
                    v = cls.average(p, grid[r, c + 1], grid[r + 1, c], grid[r + 1, c + 1])
                elif right_edge and not bottom_edge:
                    v = cls.average(p, grid[r + 1, c])
                elif bottom_edge and not right_edge:
                    v = cls.average(p, grid[r, c + 1])
                else:
                    v = p
                out[row, col] = v
        return out


@pytest.fixture
def reference():
    """Provide the reference transform implementations."""
    return ReferenceTransforms()


@pytest.fixture
def pixel_factory():
    """Provide the random packed-pixel grid generator."""
    return random_pixels


@pytest.fixture(scope="session")
def sample_pixels():
    """Provide a non-square random packed-pixel grid."""
    nx, ny = 7, 5
    return random_pixels(nx, ny), nx, ny


@pytest.fixture
def sample_image(sample_pixels):
    """Provide a fresh Image wrapping a copy of the sample grid."""
    from pyimgproc.image import Image

    grid, _, _ = sample_pixels
    return Image.from_array(grid.copy())


@pytest.fixture
def four_pixel_image():
    """2x2 image: red, green / blue, white, all opaque."""
    from pyimgproc.image import Image

    return Image(2, 2, [0xFF0000FF, 0x00FF00FF, 0x0000FFFF, 0xFFFFFFFF])
