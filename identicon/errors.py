"""Exceptions surfaced to callers of the pipeline.

The transformation stages themselves are total functions; only hashing and
writing the result can fail at runtime. Each error records the ``stage`` it
came from so callers can report it.
"""

from typing import Optional


class IdenticonError(Exception):
    """Base class for recoverable pipeline failures."""

    stage: str = "pipeline"

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class HashError(IdenticonError):
    """The input could not be hashed."""

    stage = "hash"


class StorageError(IdenticonError):
    """The image could not be encoded or written.

    Attributes:
        path: Destination that failed, if one was resolved.
    """

    stage = "save"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
