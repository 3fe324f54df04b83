"""
Global constants for pyimgproc.

Holds the Taichi data types used by the kernels together with the bit layout
of a packed pixel. Kernels import this module as ``cte``.

Pixel layout (most to least significant byte):

    0xRRGGBBAA

Author: B.G.
"""

import numpy as np
import taichi as ti

# Data type of a packed pixel, device and host side
PIXEL_TYPE_TI = ti.u32
PIXEL_TYPE_NP = np.uint32

# Channel sums can exceed 32 bits for very large blur windows
ACC_TYPE_TI = ti.i64

# Channel identifiers
RED = 0
GREEN = 1
BLUE = 2
ALPHA = 3

# Bit offset of each channel, indexed by channel identifier
RED_SHIFT = 24
GREEN_SHIFT = 16
BLUE_SHIFT = 8
ALPHA_SHIFT = 0
CHANNEL_SHIFTS = (RED_SHIFT, GREEN_SHIFT, BLUE_SHIFT, ALPHA_SHIFT)

CHANNEL_MASK = 0xFF
