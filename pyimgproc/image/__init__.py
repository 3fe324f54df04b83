"""
Image container and file I/O for pyimgproc.

Available:
- Image: packed-pixel buffer (width, height, flat uint32 data)
- load_image / save_image: Pillow-backed file helpers

Author: B.G.
"""

from .image import Image, load_image, save_image

__all__ = ["Image", "load_image", "save_image"]
