"""Target label models."""

from collections.abc import Callable, Sequence
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from merge_config.core.models.patterns import LabelPattern, to_label_pattern


class FixedBranches(BaseModel):
    """A static, ordered list of branches."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    branches: tuple[str, ...]


class DerivedBranches(BaseModel):
    """Branches computed from the target branch selected in the Github UI.

    Useful for labels like ``target: development-branch`` where the
    destination depends on what the author picked.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["derived"] = "derived"
    derive: Callable[[str], Sequence[str]]


BranchSource = Annotated[FixedBranches | DerivedBranches, Field(discriminator="kind")]


def to_branch_source(value: Any) -> Any:
    """Tag a raw branch list or callable with its branch source variant."""
    if isinstance(value, list | tuple):
        return {"kind": "fixed", "branches": value}
    if callable(value):
        return {"kind": "derived", "derive": value}
    return value


class TargetLabel(BaseModel):
    """A pull request label instructing into which branches to merge."""

    model_config = ConfigDict(frozen=True)

    pattern: LabelPattern
    branches: BranchSource

    @field_validator("pattern", mode="before")
    @classmethod
    def _coerce_pattern(cls, value: Any) -> Any:
        return to_label_pattern(value)

    @field_validator("branches", mode="before")
    @classmethod
    def _coerce_branches(cls, value: Any) -> Any:
        return to_branch_source(value)
