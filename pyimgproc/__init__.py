"""
pyimgproc: Taichi-accelerated packed-pixel image transforms.

Submodules:
- constants: pixel layout and Taichi dtypes
- pool: reusable temporary Taichi fields
- pixel: codec, indexing and averaging helpers usable inside kernels
- image: host-side Image buffer and Pillow I/O
- transforms: squash, color_rotate, blur, expand
- cli: command line entry points

Taichi must be initialised by the caller, e.g. ``ti.init(arch=ti.cpu)``.

Author: B.G.
"""

from . import constants
from . import pool
from . import pixel
from . import image
from . import transforms
from . import cli

__version__ = "0.0.1"

__all__ = ["constants", "pool", "pixel", "image", "transforms", "cli", "__version__"]
