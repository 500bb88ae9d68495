"""Input hashing.

MD5 is used purely for its fixed 16-byte, well-spread output; nothing here
relies on it being cryptographically strong.
"""

import hashlib
from typing import Union

from pyrsistent import pvector

from identicon.image import HashedImage


def digest(data: bytes) -> bytes:
    """Return the 16-byte MD5 digest of ``data``."""
    return hashlib.md5(data, usedforsecurity=False).digest()


def hash_input(value: Union[str, bytes]) -> HashedImage:
    """Hash ``value`` into a :class:`HashedImage`.

    Strings are UTF-8 encoded first; any input, including an empty one, is
    accepted.

    Args:
        value (str | bytes): Identity to derive the image from.

    Returns:
        HashedImage: Descriptor whose ``hex`` holds the 16 digest bytes.

    Raises:
        TypeError: If ``value`` is neither text nor bytes.
        UnicodeEncodeError: If ``value`` holds unpaired surrogates.
    """
    if isinstance(value, str):
        data = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
    else:
        raise TypeError(f"Expected str or bytes, got {type(value).__name__}")
    return HashedImage(hex=pvector(digest(data)))
