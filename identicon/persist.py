"""Encoding and writing rendered identicons.

Images are encoded as PNG in memory and then written in one go. Failures are
not retried; they are reported as :class:`~identicon.errors.StorageError`.
"""

import io
import logging
import os

from PIL import Image

from identicon.errors import StorageError

logger = logging.getLogger(__name__)

IMAGE_FORMAT = "PNG"
IMAGE_SUFFIX = ".png"


def encode_png(image: Image.Image) -> bytes:
    """Encode ``image`` as PNG bytes."""
    buffer = io.BytesIO()
    try:
        image.save(buffer, format=IMAGE_FORMAT)
    except (OSError, ValueError) as exc:
        raise StorageError(f"Could not encode image: {exc}") from exc
    return buffer.getvalue()


def _reason(exc: Exception) -> str:
    return getattr(exc, "strerror", None) or str(exc)


def image_path(output_dir: str, name: str) -> str:
    """Return ``<output_dir>/<name>.png``.

    Raises:
        StorageError: If ``name`` would escape ``output_dir`` or holds a NUL
            character, which no file system accepts.
    """
    if (
        name in (".", "..")
        or "\x00" in name
        or os.sep in name
        or (os.altsep and os.altsep in name)
    ):
        raise StorageError(f"Cannot use {name!r} as a file name")
    return os.path.join(output_dir, name + IMAGE_SUFFIX)


def write_image(path: str, data: bytes) -> None:
    """Write encoded image ``data`` to ``path``, replacing any existing file."""
    try:
        with open(path, "wb") as f:
            f.write(data)
    except (OSError, ValueError) as exc:
        raise StorageError(f"Could not write {path!r}: {_reason(exc)}", path) from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)


def save_image(
    image: Image.Image, name: str, output_dir: str, create_dirs: bool = False
) -> str:
    """Encode ``image`` and store it as ``<output_dir>/<name>.png``.

    Args:
        image: Rendered identicon.
        name: File stem, normally the original input string.
        output_dir: Target directory; empty means the working directory.
        create_dirs: Create ``output_dir`` first if it is missing.

    Returns:
        str: Path of the written file.

    Raises:
        StorageError: On any encoding or file system failure.
    """
    path = image_path(output_dir, name)
    if create_dirs and output_dir:
        try:
            os.makedirs(output_dir, exist_ok=True)
        except (OSError, ValueError) as exc:
            raise StorageError(
                f"Could not create {output_dir!r}: {_reason(exc)}", path
            ) from exc
    write_image(path, encode_png(image))
    logger.info("Saved identicon %s", path)
    return path
