"""Tests for core domain models."""

import re
from pathlib import Path

import pytest
from pydantic import ValidationError

from merge_config.core.models.config import (
    GithubApiMergeMethod,
    GithubApiMergeStrategyConfig,
    MergeConfig,
    RepositoryConfig,
)
from merge_config.core.models.labels import DerivedBranches, FixedBranches, TargetLabel
from merge_config.core.models.patterns import ExactPattern, RegexPattern


@pytest.mark.unit
class TestLabelPatterns:
    """Tests for ExactPattern and RegexPattern."""

    def test_exact_pattern_matches_equal_name(self) -> None:
        pattern = ExactPattern(value="cla: yes")
        assert pattern.matches("cla: yes") is True
        assert pattern.matches("cla: yes!") is False
        assert pattern.matches("CLA: YES") is False

    def test_regex_pattern_is_unanchored(self) -> None:
        pattern = RegexPattern(regex=re.compile(r"target:"))
        assert pattern.matches("target: minor") is True
        assert pattern.matches("pr target: minor") is True
        assert pattern.matches("cla: yes") is False

    def test_regex_pattern_keeps_flags(self) -> None:
        pattern = RegexPattern(regex=re.compile(r"^merge ready$", re.IGNORECASE))
        assert pattern.matches("Merge Ready") is True

    def test_string_representation(self) -> None:
        assert str(ExactPattern(value="merge-ready")) == "merge-ready"
        assert str(RegexPattern(regex=re.compile(r"target:.*"))) == "/target:.*/"


@pytest.mark.unit
class TestTargetLabel:
    """Tests for TargetLabel model."""

    def test_string_pattern_becomes_exact(self) -> None:
        label = TargetLabel(pattern="target: major", branches=["main"])
        assert isinstance(label.pattern, ExactPattern)
        assert label.pattern.value == "target: major"

    def test_compiled_pattern_becomes_regex(self) -> None:
        label = TargetLabel(pattern=re.compile(r"target:.*"), branches=["main"])
        assert isinstance(label.pattern, RegexPattern)

    def test_list_becomes_fixed_branches(self) -> None:
        label = TargetLabel(pattern="target: minor", branches=["main", "v1", "main"])
        assert isinstance(label.branches, FixedBranches)
        assert label.branches.branches == ("main", "v1", "main")

    def test_callable_becomes_derived_branches(self) -> None:
        label = TargetLabel(pattern="target: lts", branches=lambda tb: [tb])
        assert isinstance(label.branches, DerivedBranches)
        assert label.branches.derive("10.0.x") == ["10.0.x"]

    def test_explicit_variants_are_accepted(self) -> None:
        label = TargetLabel(
            pattern=ExactPattern(value="target: major"),
            branches=FixedBranches(branches=("main",)),
        )
        assert label.branches.branches == ("main",)

    def test_invalid_branches_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TargetLabel(pattern="target: major", branches="main")

    def test_invalid_pattern_rejected(self) -> None:
        with pytest.raises(ValidationError, match="pattern needs to be a string"):
            TargetLabel(pattern=42, branches=["main"])

    def test_target_label_is_frozen(self) -> None:
        label = TargetLabel(pattern="target: major", branches=["main"])
        with pytest.raises(ValidationError):
            label.pattern = ExactPattern(value="other")


@pytest.mark.unit
class TestRepositoryConfig:
    """Tests for RepositoryConfig model."""

    def test_https_remote_url(self) -> None:
        config = RepositoryConfig(user="angular", name="components")
        assert config.use_ssh is None
        assert config.remote_url == "https://github.com/angular/components.git"

    def test_ssh_remote_url(self) -> None:
        config = RepositoryConfig(user="angular", name="components", useSsh=True)
        assert config.remote_url == "git@github.com:angular/components.git"

    def test_empty_user_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RepositoryConfig(user="", name="components")


@pytest.mark.unit
class TestMergeConfig:
    """Tests for MergeConfig model."""

    def _build(self, **overrides) -> MergeConfig:
        values = {
            "project_root": Path("/work/project"),
            "repository": {"user": "angular", "name": "components"},
            "labels": [{"pattern": "target: major", "branches": ["main"]}],
            "cla_signed_label": "cla: yes",
            "merge_ready_label": "merge-ready",
            "github_api_merge": False,
        }
        values.update(overrides)
        return MergeConfig.model_validate(values)

    def test_minimal_config(self) -> None:
        config = self._build()
        assert config.github_api_merge is False
        assert config.commit_message_fixup_label is None
        assert config.required_base_commits is None
        assert len(config.labels) == 1

    def test_camel_case_keys(self) -> None:
        config = MergeConfig.model_validate(
            {
                "projectRoot": "/work/project",
                "repository": {"user": "angular", "name": "components", "useSsh": True},
                "labels": [{"pattern": "target: major", "branches": ["main"]}],
                "claSignedLabel": "cla: yes",
                "mergeReadyLabel": re.compile("merge"),
                "commitMessageFixupLabel": "fixup",
                "githubApiMerge": False,
            }
        )
        assert config.project_root == Path("/work/project")
        assert config.repository.use_ssh is True
        assert isinstance(config.merge_ready_label, RegexPattern)

    def test_github_api_merge_strategy(self) -> None:
        config = self._build(
            github_api_merge={
                "default": "squash",
                "labels": [{"pattern": "merge: rebase", "method": "rebase"}],
                "custom": "kept",
            }
        )
        strategy = config.github_api_merge
        assert isinstance(strategy, GithubApiMergeStrategyConfig)
        assert strategy.default == GithubApiMergeMethod.SQUASH
        assert strategy.labels[0].method == GithubApiMergeMethod.REBASE
        assert strategy.model_extra == {"custom": "kept"}

    def test_github_api_merge_true_rejected(self) -> None:
        with pytest.raises(ValidationError):
            self._build(github_api_merge=True)

    def test_required_base_commit(self) -> None:
        config = self._build(required_base_commits={"v1": "abc123"})
        assert config.required_base_commit("v1") == "abc123"
        assert config.required_base_commit("main") is None

    def test_required_base_commit_without_constraints(self) -> None:
        assert self._build().required_base_commit("main") is None
