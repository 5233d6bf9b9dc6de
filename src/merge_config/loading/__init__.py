"""Merge configuration loading."""

from merge_config.loading.loader import read_and_validate_config

__all__ = ["read_and_validate_config"]
