"""Merge configuration validation."""

from merge_config.validation.validator import (
    ConfigResult,
    collect_config_errors,
    validate_config,
)

__all__ = ["ConfigResult", "collect_config_errors", "validate_config"]
