"""Exception hierarchy for merge-config."""

from typing import Any


class MergeConfigError(Exception):
    """Base exception for all merge-config errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MergeConfigError):
    """Raised when the merge configuration cannot be used."""


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration result carrying errors is unwrapped."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(
            "Invalid merge configuration: " + " ".join(errors),
            details={"errors": list(errors)},
        )
        self.errors = list(errors)


class TargetLabelError(MergeConfigError):
    """Raised when target branches cannot be resolved for a pull request."""


class NoMatchingTargetLabelError(TargetLabelError):
    """Raised when no configured target label matches the pull request labels."""


class BranchResolutionError(TargetLabelError):
    """Raised when a derived branch list cannot be computed."""
