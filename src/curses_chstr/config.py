"""Buffer configuration with environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from curses_chstr.core.attrs import AttrMasks
from curses_chstr.errors import AllocationError, InvalidArgument

logger = logging.getLogger(__name__)

ENV_PREFIX = "CURSES_CHSTR_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ChstrConfig:
    """
    Settings shared by buffers.

    Environment variables (prefix ``CURSES_CHSTR_``):
    - ``MASKS``: ``ncurses`` (default) or ``curses`` to read the masks
      from the running curses module
    - ``MAX_CAPACITY``: largest number of cells a buffer may hold
    - ``LOG_LEVEL``: level used by the command line inspector
    """
    masks: AttrMasks = field(default_factory=AttrMasks.ncurses)
    max_capacity: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_capacity is not None:
            if isinstance(self.max_capacity, bool) or not isinstance(self.max_capacity, int):
                raise InvalidArgument("max_capacity must be an int or None")
            if self.max_capacity < 1:
                raise InvalidArgument(f"max_capacity must be >= 1, got {self.max_capacity}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise InvalidArgument(f"unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ChstrConfig":
        """Build a config from ``CURSES_CHSTR_*`` variables."""
        env = os.environ if environ is None else environ

        masks_name = env.get(f"{ENV_PREFIX}MASKS", "ncurses").strip().lower()
        if masks_name == "ncurses":
            masks = AttrMasks.ncurses()
        elif masks_name == "curses":
            masks = AttrMasks.from_curses()
        else:
            raise InvalidArgument(f"{ENV_PREFIX}MASKS must be 'ncurses' or 'curses', got {masks_name!r}")

        max_capacity: Optional[int] = None
        raw = env.get(f"{ENV_PREFIX}MAX_CAPACITY", "").strip()
        if raw:
            try:
                max_capacity = int(raw)
            except ValueError:
                raise InvalidArgument(f"{ENV_PREFIX}MAX_CAPACITY is not an integer: {raw!r}") from None

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").strip().upper()

        config = cls(masks=masks, max_capacity=max_capacity, log_level=log_level)
        logger.debug("Loaded config from environment: %s", config)
        return config

    def check_capacity(self, capacity: int) -> None:
        """Raise AllocationError if *capacity* exceeds the configured limit."""
        if self.max_capacity is not None and capacity > self.max_capacity:
            raise AllocationError(
                f"cannot allocate {capacity} cells (max_capacity={self.max_capacity})"
            )


_default: Optional[ChstrConfig] = None


def default_config() -> ChstrConfig:
    """Return the process-wide config, loading it from the environment once."""
    global _default
    if _default is None:
        _default = ChstrConfig.from_env()
    return _default


def set_default_config(config: Optional[ChstrConfig]) -> None:
    """Replace the process-wide config; ``None`` reloads from the environment."""
    global _default
    _default = config
