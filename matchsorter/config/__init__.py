"""Configuration loading and validation."""

from matchsorter.config.error_hints import (
    format_validation_error,
    format_validation_errors,
    get_error_hint,
)
from matchsorter.config.loader import ConfigLoader, ConfigValidationError, load_config
from matchsorter.config.schemas import KeyConfig, MatchSorterConfig, StrictBaseModel


__all__ = [
    "ConfigLoader",
    "ConfigValidationError",
    "KeyConfig",
    "MatchSorterConfig",
    "StrictBaseModel",
    "format_validation_error",
    "format_validation_errors",
    "get_error_hint",
    "load_config",
]
