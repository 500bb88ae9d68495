"""Grid construction.

The digest is cut into rows of ``CHUNK_SIZE`` bytes and each row is mirrored
around its last byte, giving ``GRID_WIDTH`` columns with left/right symmetry.
Rows are stacked top to bottom in digest order; there is no vertical mirror.
For a 16-byte digest this yields 5 rows (25 cells) and the last byte is
unused.
"""

from typing import List, Sequence

from pyrsistent import pvector

from identicon.image import Cell, ColoredImage, GriddedImage
from identicon.types import Byte, CHUNK_SIZE


def chunk(values: Sequence[Byte], size: int = CHUNK_SIZE) -> List[List[Byte]]:
    """Split ``values`` into consecutive chunks of ``size``.

    A trailing chunk shorter than ``size`` is discarded.
    """
    full = len(values) - len(values) % size
    return [list(values[i : i + size]) for i in range(0, full, size)]


def mirror_row(row: Sequence[Byte]) -> List[Byte]:
    """Append the second and first values to the row.

    >>> mirror_row([1, 2, 3])
    [1, 2, 3, 2, 1]
    """
    first, second = row[0], row[1]
    return list(row) + [second, first]


def build_grid(image: ColoredImage) -> GriddedImage:
    """Lay the digest out as a flat, row-major list of indexed cells."""
    values = [value for row in chunk(image.hex) for value in mirror_row(row)]
    grid = pvector(Cell(value=value, index=index) for index, value in enumerate(values))
    return GriddedImage(hex=image.hex, color=image.color, grid=grid)
