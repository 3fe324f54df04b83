"""
Pixel buffer transforms for pyimgproc.

Every transform reads a source buffer and writes a caller-allocated
destination buffer. Buffers are ``pyimgproc.image.Image`` objects or flat
``ti.u32`` Taichi fields. Each output pixel is computed independently, so
the kernels parallelise across the whole output.

Transforms:
- squash: strided subsampling by (xfac, yfac)
- color_rotate: RGB -> BRG channel rotation, alpha kept
- blur: box blur over in-bounds neighbours, alpha kept
- expand: 2x upsampling with edge-aware averaging

Usage:
    import taichi as ti
    import pyimgproc as pip

    ti.init(arch=ti.cpu)
    src = pip.image.load_image("in.png")
    dst = pip.image.Image.blank_like(src, 2, 2)
    pip.transforms.expand(src, dst)

Author: B.G.
"""

from .squash import squash, squash_kernel, squashed_size
from .color_rotation import color_rotate, color_rotate_kernel
from .blur import blur, blur_kernel
from .expand import expand, expand_kernel

__all__ = [
    "squash",
    "squash_kernel",
    "squashed_size",
    "color_rotate",
    "color_rotate_kernel",
    "blur",
    "blur_kernel",
    "expand",
    "expand_kernel",
]
