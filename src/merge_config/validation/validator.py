"""Structural validation of raw merge configurations."""

import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from merge_config.core.exceptions import InvalidConfigError
from merge_config.core.models.config import MergeConfig
from merge_config.core.models.labels import TargetLabel

_MISSING = object()


class ConfigResult(BaseModel):
    """Either a validated configuration or the reasons it was rejected."""

    model_config = ConfigDict(frozen=True)

    config: MergeConfig | None = None
    errors: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.config is not None and not self.errors

    def unwrap(self) -> MergeConfig:
        """Return the configuration or raise with every collected error."""
        if not self.ok:
            raise InvalidConfigError(self.errors)
        return self.config


_CONFIG_FIELDS = tuple(MergeConfig.model_fields)


def _normalize_keys(raw: Mapping[str, Any]) -> tuple[dict[str, Any], list[str]]:
    """Fold camelCase keys into their snake_case field names.

    A field given under both spellings is reported instead of picking one.
    """
    values = dict(raw)
    errors: list[str] = []
    for field in _CONFIG_FIELDS:
        alias = to_camel(field)
        if alias == field or alias not in values:
            continue
        if field in values:
            errors.append(f"Configuration specifies both `{field}` and `{alias}`.")
            del values[alias]
        else:
            values[field] = values.pop(alias)
    return values, errors


def _lookup(values: Mapping[str, Any], field: str) -> Any:
    return values.get(field, _MISSING)


def _is_present(value: Any) -> bool:
    return value is not _MISSING and bool(value)


def _is_label_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)


def _is_complete_target_label(entry: Any) -> bool:
    if isinstance(entry, TargetLabel):
        return True
    if not isinstance(entry, Mapping):
        return False
    return bool(entry.get("pattern")) and entry.get("branches") is not None


def collect_config_errors(raw: Any) -> list[str]:
    """Check a raw configuration for structural completeness.

    Every check runs so the caller sees all problems at once. Returns an
    empty list when the configuration can be used.
    """
    if not isinstance(raw, Mapping):
        return ["Configuration needs to be a mapping."]

    values, errors = _normalize_keys(raw)

    if not _is_present(_lookup(values, "project_root")):
        errors.append("Missing project root.")

    labels = _lookup(values, "labels")
    if not _is_present(labels):
        errors.append("No label configuration.")
    elif not _is_label_sequence(labels):
        errors.append("Label configuration needs to be an array.")
    else:
        for index, entry in enumerate(labels):
            if not _is_complete_target_label(entry):
                errors.append(
                    f"Target label at index {index} needs to specify a `pattern` and `branches`."
                )

    repository = _lookup(values, "repository")
    if not _is_present(repository):
        errors.append("No repository is configured.")
    elif not isinstance(repository, Mapping) or not (
        repository.get("user") and repository.get("name")
    ):
        errors.append(
            "Repository configuration needs to specify a `user` and repository `name`."
        )

    if not _is_present(_lookup(values, "cla_signed_label")):
        errors.append("No CLA signed label configured.")

    if not _is_present(_lookup(values, "merge_ready_label")):
        errors.append("No merge ready label configured.")

    github_api_merge = _lookup(values, "github_api_merge")
    if github_api_merge is _MISSING or github_api_merge is None:
        errors.append("No explicit choice of merge strategy. Please set `githubApiMerge`.")

    return errors


def _format_validation_error(exc: ValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return messages


def validate_config(raw: Any, config_dir: str | Path) -> ConfigResult:
    """Validate a raw configuration loaded from a file in ``config_dir``.

    On success the project root is resolved against ``config_dir`` and
    the typed configuration is returned. Nothing else is defaulted.
    """
    errors = collect_config_errors(raw)
    if errors:
        return ConfigResult(errors=errors)

    values, _ = _normalize_keys(raw)
    if isinstance(values["project_root"], str | os.PathLike):
        values["project_root"] = (Path(config_dir) / values["project_root"]).resolve()

    try:
        config = MergeConfig.model_validate(values)
    except ValidationError as exc:
        return ConfigResult(errors=_format_validation_error(exc))
    return ConfigResult(config=config)
