"""Domain models for merge-config."""

from merge_config.core.models.config import (
    GithubApiMergeMethod,
    GithubApiMergeStrategyConfig,
    MergeConfig,
    MergeMethodLabel,
    RepositoryConfig,
)
from merge_config.core.models.labels import (
    BranchSource,
    DerivedBranches,
    FixedBranches,
    TargetLabel,
)
from merge_config.core.models.patterns import ExactPattern, LabelPattern, RegexPattern

__all__ = [
    "ExactPattern",
    "RegexPattern",
    "LabelPattern",
    "FixedBranches",
    "DerivedBranches",
    "BranchSource",
    "TargetLabel",
    "RepositoryConfig",
    "GithubApiMergeMethod",
    "GithubApiMergeStrategyConfig",
    "MergeMethodLabel",
    "MergeConfig",
]
