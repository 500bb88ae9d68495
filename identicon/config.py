"""Runtime configuration.

The only thing that can be configured is where images are written. Values
come from ``IdenticonConfig`` defaults, then the ``IDENTICON_OUTPUT_DIR``
environment variable, then explicit overrides (e.g. CLI flags).
"""

from dataclasses import dataclass, replace
import os
from typing import Mapping, Optional


DEFAULT_OUTPUT_DIR = "identicons"
OUTPUT_DIR_ENV = "IDENTICON_OUTPUT_DIR"


@dataclass(frozen=True)
class IdenticonConfig:
    """Where and how generated images are stored.

    Attributes:
        output_dir: Directory receiving ``<input>.png`` files.
        create_dirs: Create ``output_dir`` when it does not exist. When False
            a missing directory is a storage failure.
    """

    output_dir: str = DEFAULT_OUTPUT_DIR
    create_dirs: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "IdenticonConfig":
        env = os.environ if environ is None else environ
        output_dir = env.get(OUTPUT_DIR_ENV)
        if not output_dir:
            return cls()
        return cls(output_dir=output_dir)

    def with_overrides(
        self, output_dir: Optional[str] = None, create_dirs: Optional[bool] = None
    ) -> "IdenticonConfig":
        """Return a copy with the given values applied.

        ``None`` and an empty ``output_dir`` leave the current value, the same
        way an empty ``IDENTICON_OUTPUT_DIR`` is treated by :meth:`from_env`.
        """
        config = self
        if output_dir:
            config = replace(config, output_dir=output_dir)
        if create_dirs is not None:
            config = replace(config, create_dirs=create_dirs)
        return config
