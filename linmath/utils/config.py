"""
Configuration management for linmath.

Holds the process-wide defaults consulted by approximate comparison,
text formatting and singular-inverse diagnostics. Values are stored in a
plain dataclass and can be saved to or loaded from JSON.

Example:
    >>> from linmath.utils.config import get_config, set_config
    >>> previous = set_config(get_config().update(display_precision=2))
    >>> str(vector2(1.0, 2.0))
    '(1.00, 2.00)'
    >>> set_config(previous)
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any
from pathlib import Path

from ..core.constants import (
    DEFAULT_ABS_TOL,
    DEFAULT_REL_TOL,
    DEFAULT_DISPLAY_PRECISION,
)

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Library-wide defaults.

    Attributes:
        # Comparison
        abs_tol: Absolute tolerance used by is_close when none is given
        rel_tol: Relative tolerance used by is_close when none is given

        # Formatting
        display_precision: Decimals for floating components in str();
            None prints components with their own str()

        # Diagnostics
        warn_singular: Log a warning when inverting a zero-determinant matrix
    """

    # Comparison
    abs_tol: float = DEFAULT_ABS_TOL
    rel_tol: float = DEFAULT_REL_TOL

    # Formatting
    display_precision: Optional[int] = DEFAULT_DISPLAY_PRECISION

    # Diagnostics
    warn_singular: bool = True

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.abs_tol < 0 or self.rel_tol < 0:
            raise ValueError(
                f"Tolerances must be non-negative, got abs_tol={self.abs_tol}, rel_tol={self.rel_tol}"
            )
        if self.display_precision is not None and self.display_precision < 0:
            raise ValueError(f"display_precision must be >= 0, got {self.display_precision}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary; unknown keys are kept in ``extra``."""
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}

        config = cls(**known_kwargs)
        config.extra = {**config.extra, **extra_kwargs}
        return config

    def update(self, **kwargs) -> 'Config':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return Config.from_dict(config_dict)


def load_config(filepath: str) -> Config:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        Config object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    logger.info(f"Loaded linmath config from {filepath}")
    return Config.from_dict(config_dict)


def save_config(config: Config, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    logger.info(f"Saved linmath config to {filepath}")


# =============================================================================
# Active Configuration
# =============================================================================

_active_config = Config()


def get_config() -> Config:
    """Currently active configuration."""
    return _active_config


def set_config(config: Config) -> Config:
    """
    Replace the active configuration.

    Args:
        config: New configuration

    Returns:
        The previously active configuration, so callers can restore it
    """
    global _active_config
    if not isinstance(config, Config):
        raise TypeError(f"Expected Config, got {type(config).__name__}")
    previous = _active_config
    _active_config = config
    return previous
