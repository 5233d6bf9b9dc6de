"""Merge configuration models."""

from enum import Enum
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from merge_config.core.models.labels import TargetLabel
from merge_config.core.models.patterns import LabelPattern, to_label_pattern


class GithubApiMergeMethod(str, Enum):
    """Merge methods supported by the Github pull request merge endpoint."""

    MERGE = "merge"
    SQUASH = "squash"
    REBASE = "rebase"


class MergeMethodLabel(BaseModel):
    """Overrides the merge method for pull requests carrying a matching label."""

    model_config = ConfigDict(frozen=True)

    pattern: LabelPattern
    method: GithubApiMergeMethod

    @field_validator("pattern", mode="before")
    @classmethod
    def _coerce_pattern(cls, value: Any) -> Any:
        return to_label_pattern(value)


class GithubApiMergeStrategyConfig(BaseModel):
    """Configuration for merging pull requests through the Github API.

    Unknown keys are kept as-is for the merge strategy to consume.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    default: GithubApiMergeMethod
    labels: tuple[MergeMethodLabel, ...] = ()


class RepositoryConfig(BaseModel):
    """Upstream repository the merge tool pushes to."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    user: str = Field(min_length=1)
    name: str = Field(min_length=1)
    use_ssh: bool | None = None

    @property
    def remote_url(self) -> str:
        """Clone URL for the repository on github.com."""
        if self.use_ssh:
            return f"git@github.com:{self.user}/{self.name}.git"
        return f"https://github.com/{self.user}/{self.name}.git"


class MergeConfig(BaseModel):
    """Validated configuration of the merge tool.

    Built by ``validate_config`` only; ``project_root`` is already
    absolute at that point.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    project_root: Path
    repository: RepositoryConfig
    labels: tuple[TargetLabel, ...]
    required_base_commits: dict[str, str] | None = None
    cla_signed_label: LabelPattern
    merge_ready_label: LabelPattern
    commit_message_fixup_label: LabelPattern | None = None
    github_api_merge: Literal[False] | GithubApiMergeStrategyConfig

    @field_validator(
        "cla_signed_label",
        "merge_ready_label",
        "commit_message_fixup_label",
        mode="before",
    )
    @classmethod
    def _coerce_pattern(cls, value: Any) -> Any:
        return to_label_pattern(value)

    def required_base_commit(self, branch: str) -> str | None:
        """Get the base commit a branch must contain, if one is configured."""
        if not self.required_base_commits:
            return None
        return self.required_base_commits.get(branch)
