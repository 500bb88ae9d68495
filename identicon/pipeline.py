"""Identicon pipeline orchestration.

This module chains the stages from :mod:`identicon.stages` into the complete
transformation from an input string to a stored image. Every function here is
pure except :func:`main`, which writes the result to disk.

Stage order (each consumes the previous stage's descriptor):

1. ``hash_input`` - MD5 digest bytes (:class:`~identicon.image.HashedImage`).
2. ``pick_color`` - first three bytes as the fill color.
3. ``build_grid`` - 3-byte rows mirrored to 5 columns, indexed row-major.
4. ``filter_odd_squares`` - keep even cells only.
5. ``build_pixel_map`` - 50x50 pixel square per remaining cell.
6. ``draw_image`` - paint the squares on a 250x250 canvas.
7. ``save_image`` - PNG encode and write ``<input>.png``.

Hashing failures surface as :class:`~identicon.errors.HashError` and storage
failures as :class:`~identicon.errors.StorageError`, so callers can tell which
stage failed.
"""

import logging
from typing import Optional, Union

from PIL import Image

from identicon.config import IdenticonConfig
from identicon.errors import HashError
from identicon.image import FilteredImage, HashedImage, MappedImage
from identicon.persist import save_image
from identicon.stages import (
    build_grid,
    build_pixel_map,
    draw_image,
    filter_odd_squares,
    hash_input,
    pick_color,
)
from identicon.utils.image import BoolArray, UInt8Array, cells_to_mask, image_to_array

logger = logging.getLogger(__name__)


def _hash(value: Union[str, bytes]) -> HashedImage:
    try:
        return hash_input(value)
    except (TypeError, ValueError) as exc:
        raise HashError(f"Could not hash input: {exc}") from exc


def build(value: Union[str, bytes]) -> MappedImage:
    """Run every stage up to the pixel map.

    Args:
        value (str | bytes): Identity string.

    Returns:
        MappedImage: Fully populated descriptor, ready to draw.

    Raises:
        HashError: If the input cannot be hashed.
    """
    hashed = _hash(value)
    logger.debug("Digest for %r: %s", value, bytes(hashed.hex).hex())
    colored = pick_color(hashed)
    gridded = build_grid(colored)
    filtered = filter_odd_squares(gridded)
    logger.debug(
        "Color %s, %d of %d cells painted",
        colored.color,
        len(filtered.grid),
        len(gridded.grid),
    )
    return build_pixel_map(filtered)


def generate(value: Union[str, bytes]) -> Image.Image:
    """Return the rendered identicon for ``value``."""
    return draw_image(build(value))


def render_array(value: Union[str, bytes]) -> UInt8Array:
    """Return the rendered identicon as a ``(250, 250, 3)`` ``uint8`` array."""
    return image_to_array(generate(value))


def pattern(image: FilteredImage) -> BoolArray:
    """Return the 5x5 matrix of painted cells for a filtered descriptor."""
    return cells_to_mask(image.grid)


def main(value: str, config: Optional[IdenticonConfig] = None) -> str:
    """Generate the identicon for ``value`` and save it as ``<value>.png``.

    Args:
        value: Identity string, also used as the file stem.
        config: Output settings. Defaults to :meth:`IdenticonConfig.from_env`.

    Returns:
        str: Path of the written image.

    Raises:
        HashError: If hashing fails.
        StorageError: If the image cannot be written.
    """
    if config is None:
        config = IdenticonConfig.from_env()
    image = generate(value)
    return save_image(
        image, value, config.output_dir, create_dirs=config.create_dirs
    )
