"""Cell filtering: only even-valued cells are painted."""

from pyrsistent import pvector

from identicon.image import Cell, FilteredImage, GriddedImage


def is_painted(cell: Cell) -> bool:
    return cell.value % 2 == 0


def filter_odd_squares(image: GriddedImage) -> FilteredImage:
    """Drop odd-valued cells, keeping the remaining ones in grid order.

    Indices are left untouched, so dropped cells simply leave gaps.
    """
    grid = pvector(cell for cell in image.grid if is_painted(cell))
    return FilteredImage(hex=image.hex, color=image.color, grid=grid)
