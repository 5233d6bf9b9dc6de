"""Pytest configuration and fixtures."""

import re
from pathlib import Path

import pytest

from factories import MergeConfigFactory, RawConfigFactory, TargetLabelFactory
from merge_config.core.models.config import MergeConfig
from merge_config.labels.resolver import LabelResolver


@pytest.fixture
def raw_config() -> dict:
    """Create a raw configuration that passes validation."""
    return RawConfigFactory()


@pytest.fixture
def merge_config() -> MergeConfig:
    """Create a validated configuration with overlapping target labels."""
    return MergeConfigFactory(
        labels=[
            TargetLabelFactory(pattern="target: major", branches=["main"]),
            TargetLabelFactory(pattern=re.compile(r"target:.*"), branches=["main", "v1"]),
            TargetLabelFactory(
                pattern="target: lts",
                branches=lambda target_branch: [target_branch, f"{target_branch}-lts"],
            ),
        ],
    )


@pytest.fixture
def resolver(merge_config: MergeConfig) -> LabelResolver:
    """Create a resolver for the sample configuration."""
    return LabelResolver(merge_config)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a valid executable configuration file into a nested directory."""
    config_dir = tmp_path / "project" / ".github"
    config_dir.mkdir(parents=True)
    path = config_dir / "merge-config.py"
    path.write_text(
        '''import re


def config():
    return {
        "project_root": "../",
        "repository": {"user": "angular", "name": "components", "use_ssh": True},
        "labels": [
            {"pattern": "target: major", "branches": ["main"]},
            {"pattern": "target: patch", "branches": lambda tb: [tb, "main"]},
            {"pattern": re.compile(r"target:.*"), "branches": ["main", "v1"]},
        ],
        "required_base_commits": {"v1": "abc123"},
        "cla_signed_label": "cla: yes",
        "merge_ready_label": re.compile(r"^merge-ready$"),
        "commit_message_fixup_label": "commit message fixup",
        "github_api_merge": {
            "default": "rebase",
            "labels": [{"pattern": "merge: squash", "method": "squash"}],
        },
    }
''',
        encoding="utf-8",
    )
    return path
