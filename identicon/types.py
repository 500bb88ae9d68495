"""Common type aliases and layout constants.

The canvas is a ``GRID_WIDTH`` x ``GRID_WIDTH`` board of square cells, each
``CELL_SIZE`` pixels wide, so the rendered image is always
``IMAGE_SIZE`` x ``IMAGE_SIZE`` pixels.
"""

from typing import Tuple


Byte = int
Color = Tuple[int, int, int]
# Pixel coordinate alias (x, y)
Point = Tuple[int, int]

GRID_WIDTH = 5
CELL_SIZE = 50
IMAGE_SIZE = GRID_WIDTH * CELL_SIZE

# Bytes consumed per grid row before mirroring
CHUNK_SIZE = 3

BACKGROUND: Color = (255, 255, 255)
