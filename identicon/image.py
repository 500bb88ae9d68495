"""Immutable image descriptors threaded through the pipeline.

Every stage of the pipeline is a pure function that takes the descriptor
produced by its predecessor and returns a *new*, richer descriptor; nothing is
mutated in place. Each stage has its own frozen dataclass so the type of a
value tells exactly which fields are populated:

* :class:`HashedImage` - ``hex`` digest bytes.
* :class:`ColoredImage` - adds the fill ``color``.
* :class:`GriddedImage` - adds the mirrored 5x5 ``grid``.
* :class:`FilteredImage` - same fields, ``grid`` narrowed to even cells.
* :class:`MappedImage` - adds the ``pixel_map`` of squares to paint.

Later descriptors subclass earlier ones, so fields set by one stage are
carried unchanged through all the following ones. Sequences are persistent
vectors (``pyrsistent.PVector``).
"""

from dataclasses import dataclass
from pyrsistent.typing import PVector

from identicon.types import Byte, Color, Point


@dataclass(frozen=True)
class Cell:
    """One grid square.

    Attributes:
        value: Byte taken from the digest; even values get painted.
        index: Position in the flattened, unfiltered grid (row-major).
    """

    value: Byte
    index: int


@dataclass(frozen=True)
class Rect:
    """Axis-aligned pixel square, ``bottom_right`` is exclusive when drawn."""

    top_left: Point
    bottom_right: Point


@dataclass(frozen=True)
class HashedImage:
    """Digest of the input.

    Attributes:
        hex (PVector[int]): Digest bytes in order (16 for MD5).
    """

    hex: PVector[Byte]


@dataclass(frozen=True)
class ColoredImage(HashedImage):
    """Digest plus fill color (the first three digest bytes)."""

    color: Color


@dataclass(frozen=True)
class GriddedImage(ColoredImage):
    """Colored descriptor with the full mirrored grid (25 cells for MD5)."""

    grid: PVector[Cell]


@dataclass(frozen=True)
class FilteredImage(GriddedImage):
    """Gridded descriptor whose ``grid`` only keeps the cells to paint."""


@dataclass(frozen=True)
class MappedImage(FilteredImage):
    """Filtered descriptor with one pixel rectangle per remaining cell."""

    pixel_map: PVector[Rect]
