# topmark:header:start
#
#   project      : YarsFormat
#   file         : __init__.py
#   file_relpath : src/yars_format/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for yars-format.

The formatter never consults ambient process state. Callers build a
`MutableConfig`, apply their overrides and ``freeze()`` it into an immutable
`Config` that is threaded explicitly through the API calls.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from yars_format.config.logging import YarsLogger, get_logger
from yars_format.constants import STRING_EMIT_WIDTH

logger: YarsLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable configuration snapshot used by a formatting run.

    Attributes:
        check_only (bool): Report whether files would change without writing them.
        verbose (bool): Emit one status line per processed file (CLI only).
        width (int): Line width hint handed to the emitter. Scalars are never
            wrapped, so this does not change the output layout.
    """

    check_only: bool = False
    verbose: bool = False
    width: int = STRING_EMIT_WIDTH

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the default configuration."""
        return MutableConfig.from_defaults().freeze()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A builder seeded with this snapshot's values.
        """
        return MutableConfig(check_only=self.check_only, verbose=self.verbose, width=self.width)

    def with_overrides(self, **overrides: Any) -> Config:
        """Return a new snapshot with the given fields replaced."""
        return replace(self, **overrides)


@dataclass
class MutableConfig:
    """Mutable builder for `Config`.

    Attributes:
        check_only (bool): See `Config.check_only`.
        verbose (bool): See `Config.verbose`.
        width (int): See `Config.width`.
    """

    check_only: bool = False
    verbose: bool = False
    width: int = STRING_EMIT_WIDTH

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls()

    def freeze(self) -> Config:
        """Validate and freeze this builder into an immutable `Config`.

        Returns:
            Config: The immutable snapshot.

        Raises:
            ValueError: If ``width`` is not a positive integer.
        """
        if self.width <= 0:
            raise ValueError(f"width must be > 0 (got {self.width})")
        cfg = Config(check_only=self.check_only, verbose=self.verbose, width=self.width)
        logger.trace("Frozen config: %r", cfg)
        return cfg


__all__: list[str] = ["Config", "MutableConfig"]
