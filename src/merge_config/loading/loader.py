"""Loading of executable merge configuration files."""

import importlib.util
import sys
from pathlib import Path
from typing import Any

import structlog

from merge_config.validation.validator import ConfigResult, validate_config

logger = structlog.get_logger(__name__)

CONFIG_EXPORT = "config"


def _evaluate_config_file(file_path: Path) -> Any:
    """Import a Python config file and return the value it exports.

    The module must define ``config``, either the configuration mapping
    itself or a function without arguments returning it.
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"No such file: {file_path}")

    spec = importlib.util.spec_from_file_location(f"_merge_config_{file_path.stem}", file_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot import {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    try:
        spec.loader.exec_module(module)

        if not hasattr(module, CONFIG_EXPORT):
            raise AttributeError(f"{file_path.name} does not export `{CONFIG_EXPORT}`")

        exported = getattr(module, CONFIG_EXPORT)
        return exported() if callable(exported) else exported
    finally:
        sys.modules.pop(spec.name, None)


def read_and_validate_config(file_path: str | Path) -> ConfigResult:
    """Read and validate the configuration file at the given location.

    Failures to find or evaluate the file are reported as a single error
    in the returned result, like any structural problem.
    """
    file_path = Path(file_path).expanduser().absolute()

    try:
        raw = _evaluate_config_file(file_path)
    except Exception as e:
        logger.debug("Config file could not be loaded", path=str(file_path), error=str(e))
        return ConfigResult(errors=[f"File could not be loaded. Error: {e}"])

    result = validate_config(raw, file_path.parent)
    if result.ok:
        logger.debug("Config loaded", path=str(file_path), labels=len(result.config.labels))
    else:
        logger.debug("Config rejected", path=str(file_path), errors=len(result.errors))
    return result
