"""Default configuration for element accessors."""

from __future__ import annotations

import copy
import math
import sys
from dataclasses import dataclass
from typing import Optional

# Largest cutoff whose square still fits in a double.
DEFAULT_MAX_DISTANCE = math.sqrt(sys.float_info.max - 1000)

DEFAULT_MAX_RETRIES = 100

# Marks an argument left to the process-wide configuration; ``None`` is a real value there.
UNSET = object()


@dataclass
class AccessorConfig:
    """Settings shared by accessors that do not override them explicitly."""

    max_distance: float = DEFAULT_MAX_DISTANCE
    max_retries: Optional[int] = DEFAULT_MAX_RETRIES

    def __post_init__(self) -> None:
        self.max_distance = float(self.max_distance)
        if math.isnan(self.max_distance) or self.max_distance < 0:
            raise ValueError(f"max_distance must be a non-negative number, got {self.max_distance!r}")
        if self.max_retries is not None and self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0 or None, got {self.max_retries!r}")


_ACCESSOR_CONFIG = AccessorConfig()


def get_accessor_config() -> AccessorConfig:
    return copy.deepcopy(_ACCESSOR_CONFIG)


def set_accessor_config(config: AccessorConfig) -> None:
    global _ACCESSOR_CONFIG
    _ACCESSOR_CONFIG = copy.deepcopy(config)


__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "DEFAULT_MAX_RETRIES",
    "UNSET",
    "AccessorConfig",
    "get_accessor_config",
    "set_accessor_config",
]
