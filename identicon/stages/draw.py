"""Rasterization with Pillow.

The canvas is opaque ``RGB`` filled with ``BACKGROUND`` (white). Every
:class:`~identicon.image.Rect` is painted with the descriptor's color over
``[x0, x1) x [y0, y1)``; Pillow's ``rectangle`` includes both corners, so the
far edge is pulled in by one pixel. Squares therefore tile the canvas exactly
and the result does not depend on drawing order.
"""

from PIL import Image, ImageDraw

from identicon.image import MappedImage
from identicon.types import BACKGROUND, IMAGE_SIZE


def draw_image(image: MappedImage, size: int = IMAGE_SIZE) -> Image.Image:
    """Render the descriptor's pixel map onto a fresh ``size`` x ``size`` canvas."""
    canvas = Image.new("RGB", (size, size), BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    for rect in image.pixel_map:
        (x0, y0), (x1, y1) = rect.top_left, rect.bottom_right
        draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=image.color)
    return canvas
