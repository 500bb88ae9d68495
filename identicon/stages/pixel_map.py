"""Mapping grid cells to pixel squares."""

from pyrsistent import pvector

from identicon.image import FilteredImage, MappedImage, Rect
from identicon.types import CELL_SIZE, GRID_WIDTH


def cell_rect(index: int, cell_size: int = CELL_SIZE, grid_width: int = GRID_WIDTH) -> Rect:
    """Return the pixel square covered by the cell at flattened ``index``.

    >>> cell_rect(7)
    Rect(top_left=(100, 50), bottom_right=(150, 100))
    """
    horizontal = (index % grid_width) * cell_size
    vertical = (index // grid_width) * cell_size
    return Rect(
        top_left=(horizontal, vertical),
        bottom_right=(horizontal + cell_size, vertical + cell_size),
    )


def build_pixel_map(image: FilteredImage) -> MappedImage:
    """Attach one :class:`Rect` per remaining cell, in grid order."""
    pixel_map = pvector(cell_rect(cell.index) for cell in image.grid)
    return MappedImage(
        hex=image.hex, color=image.color, grid=image.grid, pixel_map=pixel_map
    )
