import itertools

import pytest
from pyrsistent import pvector

from identicon.image import Cell, FilteredImage, MappedImage, Rect
from identicon.pipeline import build
from identicon.stages.pixel_map import build_pixel_map, cell_rect
from tests.test_utils import (
    BLAKE_FILTERED,
    BLAKE_PIXEL_MAP,
    SAMPLE_INPUTS,
    cell_tuples,
    make_blake_image,
    rect_tuples,
)


@pytest.mark.parametrize(
    "index, expected",
    [
        (0, ((0, 0), (50, 50))),
        (4, ((200, 0), (250, 50))),
        (5, ((0, 50), (50, 100))),
        (12, ((100, 100), (150, 150))),
        (24, ((200, 200), (250, 250))),
    ],
)
def test_cell_rect(index: int, expected: tuple[tuple[int, int], tuple[int, int]]) -> None:
    assert rect_tuples([cell_rect(index)]) == [expected]


@pytest.mark.parametrize("index", range(25))
def test_cell_rect_bounds(index: int) -> None:
    rect = cell_rect(index)
    (x0, y0), (x1, y1) = rect.top_left, rect.bottom_right
    assert 0 <= x0 <= 200 and 0 <= y0 <= 200
    assert 50 <= x1 <= 250 and 50 <= y1 <= 250
    assert (x1 - x0, y1 - y0) == (50, 50)


def test_build_pixel_map_blake() -> None:
    image = make_blake_image()
    assert isinstance(image, MappedImage)
    assert rect_tuples(image.pixel_map) == BLAKE_PIXEL_MAP
    assert image.pixel_map[0] == Rect((0, 0), (50, 50))
    assert cell_tuples(image.grid) == BLAKE_FILTERED


def test_build_pixel_map_uses_original_indices() -> None:
    filtered = FilteredImage(
        hex=pvector([0, 0, 0]),
        color=(0, 0, 0),
        grid=pvector([Cell(2, 3), Cell(4, 18)]),
    )
    image = build_pixel_map(filtered)
    assert rect_tuples(image.pixel_map) == [
        ((150, 0), (200, 50)),
        ((150, 150), (200, 200)),
    ]


@pytest.mark.parametrize("value", SAMPLE_INPUTS)
def test_pixel_map_rects_do_not_overlap(value: str) -> None:
    image = build(value)
    assert len(image.pixel_map) == len(image.grid)
    for a, b in itertools.combinations(image.pixel_map, 2):
        (ax0, ay0), (ax1, ay1) = a.top_left, a.bottom_right
        (bx0, by0), (bx1, by1) = b.top_left, b.bottom_right
        assert ax1 <= bx0 or bx1 <= ax0 or ay1 <= by0 or by1 <= ay0
