"""Fill color selection."""

from identicon.image import ColoredImage, HashedImage


def pick_color(image: HashedImage) -> ColoredImage:
    """Use the first three digest bytes as the (R, G, B) fill color."""
    assert len(image.hex) >= 3, "digest must hold at least three bytes"
    r, g, b = image.hex[0], image.hex[1], image.hex[2]
    return ColoredImage(hex=image.hex, color=(r, g, b))
