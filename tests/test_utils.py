"""Shared fixtures: the ``"blake"`` example worked through every stage."""

from typing import Iterable, List, Tuple

from identicon.image import Cell, MappedImage, Rect
from identicon.pipeline import build

BLAKE = "blake"

BLAKE_HEX: List[int] = [
    58, 164, 158, 198, 191, 201, 16, 100, 127, 161, 197, 160, 19, 228, 142, 239,
]

BLAKE_COLOR: Tuple[int, int, int] = (58, 164, 158)

BLAKE_GRID: List[Tuple[int, int]] = [
    (58, 0), (164, 1), (158, 2), (164, 3), (58, 4),
    (198, 5), (191, 6), (201, 7), (191, 8), (198, 9),
    (16, 10), (100, 11), (127, 12), (100, 13), (16, 14),
    (161, 15), (197, 16), (160, 17), (197, 18), (161, 19),
    (19, 20), (228, 21), (142, 22), (228, 23), (19, 24),
]

BLAKE_FILTERED: List[Tuple[int, int]] = [
    (58, 0), (164, 1), (158, 2), (164, 3), (58, 4),
    (198, 5), (198, 9),
    (16, 10), (100, 11), (100, 13), (16, 14),
    (160, 17),
    (228, 21), (142, 22), (228, 23),
]

BLAKE_PIXEL_MAP: List[Tuple[Tuple[int, int], Tuple[int, int]]] = [
    ((0, 0), (50, 50)),
    ((50, 0), (100, 50)),
    ((100, 0), (150, 50)),
    ((150, 0), (200, 50)),
    ((200, 0), (250, 50)),
    ((0, 50), (50, 100)),
    ((200, 50), (250, 100)),
    ((0, 100), (50, 150)),
    ((50, 100), (100, 150)),
    ((150, 100), (200, 150)),
    ((200, 100), (250, 150)),
    ((100, 150), (150, 200)),
    ((50, 200), (100, 250)),
    ((100, 200), (150, 250)),
    ((150, 200), (200, 250)),
]

SAMPLE_INPUTS: List[str] = ["blake", "", "octocat", "ünïcödé", "a" * 1000]


def make_blake_image() -> MappedImage:
    """Fully mapped descriptor for ``"blake"``."""
    return build(BLAKE)


def cell_tuples(cells: Iterable[Cell]) -> List[Tuple[int, int]]:
    """``(value, index)`` pairs, as listed in the fixtures above."""
    return [(cell.value, cell.index) for cell in cells]


def rect_tuples(rects: Iterable[Rect]) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    """``(top_left, bottom_right)`` pairs, as listed in the fixtures above."""
    return [(rect.top_left, rect.bottom_right) for rect in rects]
