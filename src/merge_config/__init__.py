"""merge-config: Merge configuration validation and target label resolution."""

from merge_config.core.models import MergeConfig, TargetLabel
from merge_config.labels import LabelResolver
from merge_config.loading import read_and_validate_config
from merge_config.validation import ConfigResult, validate_config

__version__ = "0.1.0"

__all__ = [
    "ConfigResult",
    "LabelResolver",
    "MergeConfig",
    "TargetLabel",
    "read_and_validate_config",
    "validate_config",
]
