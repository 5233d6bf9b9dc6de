"""Core domain models and exceptions for merge-config."""

from merge_config.core.exceptions import (
    BranchResolutionError,
    ConfigurationError,
    InvalidConfigError,
    MergeConfigError,
    NoMatchingTargetLabelError,
    TargetLabelError,
)
from merge_config.core.models import (
    DerivedBranches,
    ExactPattern,
    FixedBranches,
    GithubApiMergeMethod,
    GithubApiMergeStrategyConfig,
    MergeConfig,
    RegexPattern,
    RepositoryConfig,
    TargetLabel,
)

__all__ = [
    # Models
    "ExactPattern",
    "RegexPattern",
    "FixedBranches",
    "DerivedBranches",
    "TargetLabel",
    "RepositoryConfig",
    "GithubApiMergeMethod",
    "GithubApiMergeStrategyConfig",
    "MergeConfig",
    # Exceptions
    "MergeConfigError",
    "ConfigurationError",
    "InvalidConfigError",
    "TargetLabelError",
    "NoMatchingTargetLabelError",
    "BranchResolutionError",
]
