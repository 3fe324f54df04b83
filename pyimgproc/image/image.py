"""
Host-side image container for pyimgproc.

An ``Image`` is a width, a height and a flat row-major ``uint32`` buffer of
packed 0xRRGGBBAA pixels. It is the buffer type the transforms read from and
write into; the transforms never reallocate it.

Conversion helpers move images to and from (H, W, 4) RGBA arrays and Pillow
images, so that file decoding and encoding stay with Pillow.

Author: B.G.
"""

import numpy as np
from PIL import Image as PILImage

from .. import constants as cte
from ..pixel.codec import pack_rgba, unpack_rgba


class Image:
    """
    Packed-pixel image buffer.

    Args:
        width: Number of columns (> 0)
        height: Number of rows (> 0)
        data: Optional sequence of ``width * height`` packed pixels. The array
              is used as-is when it is already a contiguous 1D uint32 array,
              otherwise it is copied. Defaults to all-zero pixels.

    Raises:
        ValueError: If dimensions are not positive or data has the wrong length
    """

    def __init__(self, width, height, data=None):
        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

        if data is None:
            data = np.zeros(width * height, dtype=cte.PIXEL_TYPE_NP)
        else:
            data = np.ascontiguousarray(data, dtype=cte.PIXEL_TYPE_NP).reshape(-1)
            if data.size != width * height:
                raise ValueError(
                    f"Image data holds {data.size} pixels, expected {width * height} "
                    f"for a {width}x{height} image"
                )

        self.width = width
        self.height = height
        self.data = data

    @classmethod
    def blank_like(cls, other, scale_x=1, scale_y=1):
        """Allocate a zeroed image sized from ``other`` multiplied by the given scales."""
        return cls(other.width * scale_x, other.height * scale_y)

    @classmethod
    def from_array(cls, pixels):
        """Wrap a 2D (height, width) array of packed pixels."""
        pixels = np.asarray(pixels)
        if pixels.ndim != 2:
            raise ValueError("Packed pixel array must be 2D")
        height, width = pixels.shape
        return cls(width, height, pixels)

    @classmethod
    def from_rgba(cls, rgba):
        """Build an image from an (H, W, 4) uint8 RGBA array."""
        rgba = np.asarray(rgba)
        if rgba.ndim != 3 or rgba.shape[2] != 4:
            raise ValueError(f"RGBA array must have shape (H, W, 4), got {rgba.shape}")
        return cls.from_array(pack_rgba(rgba))

    @classmethod
    def from_pil(cls, pil_image):
        """Build an image from a Pillow image of any mode."""
        return cls.from_rgba(np.asarray(pil_image.convert("RGBA")))

    @property
    def shape(self):
        """(height, width), the NumPy ordering."""
        return (self.height, self.width)

    def to_array(self):
        """View of the data as a (height, width) packed pixel array."""
        return self.data.reshape(self.height, self.width)

    def to_rgba(self):
        return unpack_rgba(self.to_array())

    def to_pil(self):
        return PILImage.fromarray(self.to_rgba())

    def pixel_at(self, row, col):
        """Pixel at (row, col) as a Python int."""
        return int(self.data[row * self.width + col])

    def copy(self):
        return Image(self.width, self.height, self.data.copy())

    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.data, other.data)
        )

    def __repr__(self):
        return f"Image(width={self.width}, height={self.height})"


def load_image(path):
    """
    Load an image file into a packed-pixel ``Image``.

    Any format Pillow can read is accepted; pixels are converted to RGBA.
    """
    with PILImage.open(path) as img:
        return Image.from_pil(img)


def save_image(image, path):
    """Save an ``Image`` through Pillow; the format follows the file extension."""
    image.to_pil().save(path)
