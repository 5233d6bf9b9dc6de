"""Configuration of the merge-config tool itself."""

from merge_config.config.logging import configure_logging
from merge_config.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
