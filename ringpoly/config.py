"""
Engine configuration for polynomial arithmetic.

The defaults reproduce the textbook behaviour of the engine: Karatsuba
recursion all the way down to blocks of one or two coefficients, and a
silent logger. Tuning is only ever a performance decision; every
configuration produces the same products.

Example:
    >>> from ringpoly.config import EngineConfig, set_config
    >>> set_config(EngineConfig(karatsuba_cutoff=16))
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

import logzero


@dataclass
class EngineConfig:
    """
    Tunable parameters of the polynomial engine.

    Attributes:
        karatsuba_cutoff: Padded blocks of at most this many coefficients are
            multiplied by schoolbook convolution instead of splitting further.
            The default of 2 keeps only the length-1 and length-2 base cases.
        log_level: Level of the package logger once the config is installed.
    """

    karatsuba_cutoff: int = 2
    log_level: int = logging.WARNING

    def __post_init__(self):
        """Validate configuration."""
        if self.karatsuba_cutoff < 1:
            raise ValueError("karatsuba_cutoff must be at least 1")

    def summary(self) -> str:
        """Return configuration summary string."""
        return (
            f"EngineConfig:\n"
            f"  Karatsuba cutoff: {self.karatsuba_cutoff}\n"
            f"  Log level: {logging.getLevelName(self.log_level)}"
        )


_config = EngineConfig()
logger = logzero.setup_logger(name="ringpoly", level=_config.log_level)


def get_config() -> EngineConfig:
    """Return the process-wide default configuration."""
    return _config


def set_config(config: EngineConfig) -> EngineConfig:
    """
    Install ``config`` as the process-wide default.

    Returns the previously installed configuration so callers can restore it.
    """
    global _config
    previous = _config
    _config = config
    logzero.setup_logger(name="ringpoly", level=config.log_level)
    return previous


def set_log_level(level: int):
    """
    Change only the log level of the current configuration.

    Only the ``ringpoly`` logger is touched; logzero's default logger keeps
    whatever level the host application gave it.
    """
    _config.log_level = level
    logzero.setup_logger(name="ringpoly", level=level)
