"""Pipeline stages.

Each module exports one pure function turning a descriptor from
:mod:`identicon.image` into the next one. :mod:`identicon.pipeline` wires them
together in the only valid order:

hash -> color -> grid -> filter -> pixel map -> draw
"""

from .hash import hash_input
from .color import pick_color
from .grid import build_grid, chunk, mirror_row
from .filter import filter_odd_squares
from .pixel_map import build_pixel_map, cell_rect
from .draw import draw_image

__all__ = [
    "hash_input",
    "pick_color",
    "build_grid",
    "chunk",
    "mirror_row",
    "filter_odd_squares",
    "build_pixel_map",
    "cell_rect",
    "draw_image",
]
