"""Resolution of pull request labels against the merge configuration."""

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict

from merge_config.core.exceptions import BranchResolutionError, NoMatchingTargetLabelError
from merge_config.core.models.config import GithubApiMergeMethod, MergeConfig
from merge_config.core.models.labels import FixedBranches, TargetLabel
from merge_config.core.models.patterns import ExactPattern, RegexPattern


def matches_any(pattern: ExactPattern | RegexPattern | None, label_names: Iterable[str]) -> bool:
    """Check whether a pattern matches at least one of the given label names."""
    if pattern is None:
        return False
    return any(pattern.matches(name) for name in label_names)


class LabelCategories(BaseModel):
    """Single-purpose label categories found on a pull request."""

    model_config = ConfigDict(frozen=True)

    cla_signed: bool
    merge_ready: bool
    commit_message_fixup: bool


class TargetLabelMatch(BaseModel):
    """The target label selected for a pull request.

    ``shadowed`` holds configured target labels further down the list that
    also matched but were ignored because an earlier entry won.
    """

    model_config = ConfigDict(frozen=True)

    target_label: TargetLabel
    matched_label: str
    shadowed: tuple[TargetLabel, ...] = ()


class LabelResolver:
    """Interprets the labels of a pull request using a merge configuration.

    Holds no state besides the configuration; every call is recomputed
    from its arguments.
    """

    def __init__(self, config: MergeConfig) -> None:
        self._config = config

    @property
    def config(self) -> MergeConfig:
        return self._config

    def classify(self, label_names: Iterable[str]) -> LabelCategories:
        """Determine which label categories apply to a pull request."""
        names = list(label_names)
        return LabelCategories(
            cla_signed=matches_any(self._config.cla_signed_label, names),
            merge_ready=matches_any(self._config.merge_ready_label, names),
            commit_message_fixup=matches_any(self._config.commit_message_fixup_label, names),
        )

    def is_cla_signed(self, label_names: Iterable[str]) -> bool:
        return matches_any(self._config.cla_signed_label, label_names)

    def is_merge_ready(self, label_names: Iterable[str]) -> bool:
        return matches_any(self._config.merge_ready_label, label_names)

    def needs_commit_message_fixup(self, label_names: Iterable[str]) -> bool:
        return matches_any(self._config.commit_message_fixup_label, label_names)

    def match_target_label(self, label_names: Iterable[str]) -> TargetLabelMatch:
        """Select the first configured target label matching the pull request.

        Raises:
            NoMatchingTargetLabelError: If no target label matches.
        """
        names = list(label_names)
        selected: TargetLabelMatch | None = None
        shadowed: list[TargetLabel] = []

        for target_label in self._config.labels:
            matched = next((name for name in names if target_label.pattern.matches(name)), None)
            if matched is None:
                continue
            if selected is None:
                selected = TargetLabelMatch(target_label=target_label, matched_label=matched)
            else:
                shadowed.append(target_label)

        if selected is None:
            raise NoMatchingTargetLabelError(
                "Could not find a target label for the pull request.",
                details={"labels": names},
            )
        return selected.model_copy(update={"shadowed": tuple(shadowed)})

    def branches_for(self, target_label: TargetLabel, github_target_branch: str) -> list[str]:
        """Compute the branches a target label merges into.

        Raises:
            BranchResolutionError: If derived branches cannot be computed.
        """
        source = target_label.branches
        if isinstance(source, FixedBranches):
            return list(source.branches)

        try:
            branches = source.derive(github_target_branch)
        except Exception as e:
            raise BranchResolutionError(
                f"Could not determine branches for target label {target_label.pattern}: {e}",
                details={"github_target_branch": github_target_branch},
            ) from e

        if not isinstance(branches, Sequence) or isinstance(branches, str | bytes):
            raise BranchResolutionError(
                f"Branches for target label {target_label.pattern} need to be a list, "
                f"got {type(branches).__name__}.",
                details={"github_target_branch": github_target_branch},
            )
        return list(branches)

    def resolve_target_branches(
        self, label_names: Iterable[str], github_target_branch: str
    ) -> list[str]:
        """Resolve the branches a pull request should be merged into.

        The result may be empty when the matching target label resolves to
        no branches; callers should refuse to merge in that case.

        Raises:
            NoMatchingTargetLabelError: If no target label matches.
            BranchResolutionError: If derived branches cannot be computed.
        """
        match = self.match_target_label(label_names)
        return self.branches_for(match.target_label, github_target_branch)

    def resolve_merge_method(self, label_names: Iterable[str]) -> GithubApiMergeMethod | None:
        """Get the Github API merge method, or None if API merging is disabled."""
        strategy = self._config.github_api_merge
        if strategy is False:
            return None

        names = list(label_names)
        for override in strategy.labels:
            if matches_any(override.pattern, names):
                return override.method
        return strategy.default
