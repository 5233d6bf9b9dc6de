"""Label patterns: exact strings or regular expressions."""

import re
from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ExactPattern(BaseModel):
    """Matches a label name by equality."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["exact"] = "exact"
    value: str

    def matches(self, candidate: str) -> bool:
        return candidate == self.value

    def __str__(self) -> str:
        return self.value


class RegexPattern(BaseModel):
    """Matches a label name when the expression is found anywhere in it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["regex"] = "regex"
    regex: re.Pattern[str]

    def matches(self, candidate: str) -> bool:
        return self.regex.search(candidate) is not None

    def __str__(self) -> str:
        return f"/{self.regex.pattern}/"


LabelPattern = Annotated[ExactPattern | RegexPattern, Field(discriminator="kind")]


def to_label_pattern(value: Any) -> Any:
    """Tag a raw string or compiled expression with its pattern variant.

    Pattern models and their mapping form pass through unchanged.
    """
    if isinstance(value, str):
        return {"kind": "exact", "value": value}
    if isinstance(value, re.Pattern):
        return {"kind": "regex", "regex": value}
    if value is None or isinstance(value, ExactPattern | RegexPattern | Mapping):
        return value
    raise ValueError("pattern needs to be a string or compiled regular expression")
