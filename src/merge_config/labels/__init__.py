"""Pull request label resolution."""

from merge_config.labels.resolver import (
    LabelCategories,
    LabelResolver,
    TargetLabelMatch,
    matches_any,
)

__all__ = ["LabelCategories", "LabelResolver", "TargetLabelMatch", "matches_any"]
