"""Limits shared by the filter families."""

BYTE_MAX = 255

MAX_BYTES_PER_PIXEL = 16

# Shift bounds (inclusive)
MAX_BYTE_SHIFT = 8
MAX_UINT_SHIFT = 32

# Neighborhood kernels
KERNEL_SIZES = (3, 5, 7, 9)
MAX_KERNEL_RIGHT_SHIFT = 7
INT16_MIN = -32768
INT16_MAX = 32767

# Sobel-X needs at least this many columns/rows
SOBEL_MIN_COLUMNS = 8
SOBEL_MIN_ROWS = 3

FAMILIES = ('dual', 'scalar', 'multibyte', 'neighborhood')
