"""NumPy views of rendered identicons."""

from typing import Iterable

import numpy as np
import numpy.typing as npt
from PIL import Image

from identicon.image import Cell
from identicon.types import GRID_WIDTH

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]


def image_to_array(image: Image.Image) -> UInt8Array:
    """Return the image as an ``(H, W, C)`` ``uint8`` array."""
    return np.array(image, dtype=np.uint8)


def cells_to_mask(cells: Iterable[Cell], grid_width: int = GRID_WIDTH) -> BoolArray:
    """Return a ``(grid_width, grid_width)`` mask, True where a cell is present.

    Indices are row-major, matching the pixel layout.
    """
    mask: BoolArray = np.zeros((grid_width, grid_width), dtype=np.bool_)
    for cell in cells:
        mask[cell.index // grid_width, cell.index % grid_width] = True
    return mask
