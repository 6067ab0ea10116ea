"""Runtime configuration for testidentity - which framework a project targets."""

import copy
import os
import tomllib
from pathlib import Path
from typing import Any

from testidentity.framework_registry import (
    FrameworkIdentifiers,
    TestingFramework,
    get_for_framework,
    get_testing_framework_by_code_name,
)
from testidentity.utils.constants import ENV_PREFIX, PYPROJECT_FILE, PYPROJECT_TOOL_KEY
from testidentity.utils.logging import logger

DEFAULTS: dict[str, Any] = {
    "framework": "",
    "strict": False,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


class UnknownFrameworkError(ValueError):
    """Raised in strict mode when the configured framework name is not recognized."""

    def __init__(self, name: str):
        super().__init__(f"Unknown testing framework: '{name}'")
        self.name = name


def _load_pyproject_section(root: Path) -> dict[str, Any]:
    path = root / PYPROJECT_FILE
    if not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Could not load {path}: {err}", path=str(path), err=str(e))
        return {}

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        logger.warning("[tool] in {path} is not a table, ignoring", path=str(path))
        return {}

    section = tool.get(PYPROJECT_TOOL_KEY, {})
    if not isinstance(section, dict):
        logger.warning(
            "[tool.{key}] in {path} is not a table, ignoring",
            key=PYPROJECT_TOOL_KEY,
            path=str(path),
        )
        return {}
    return section


def load_runtime_config(root: str | Path = ".") -> dict[str, Any]:
    """
    Load runtime configuration from pyproject.toml and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (TESTIDENTITY_* prefixed)
    2. [tool.testidentity] in pyproject.toml
    3. Built-in defaults

    Values whose type does not match the default are ignored.

    Args:
        root: Project root containing pyproject.toml

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    for key, value in _load_pyproject_section(Path(root)).items():
        if key in cfg and isinstance(value, type(cfg[key])):
            cfg[key] = value
        else:
            logger.warning("Ignoring config key {key}={value!r}", key=key, value=value)

    for key, default_value in DEFAULTS.items():
        env_var = f"{ENV_PREFIX}{key.upper()}"
        if env_var not in os.environ:
            continue
        value = os.environ[env_var]
        if isinstance(default_value, bool):
            cfg[key] = value.strip().lower() in _TRUE_VALUES
        else:
            cfg[key] = value

    return cfg


def resolve_configured_framework(root: str | Path = ".") -> FrameworkIdentifiers | None:
    """Identifiers for the project's configured framework.

    Returns None when no framework is configured or the name is not recognized.
    In strict mode an unrecognized, non-empty name raises UnknownFrameworkError.
    """
    cfg = load_runtime_config(root)
    name = cfg["framework"]
    if not name:
        return None

    framework = get_testing_framework_by_code_name(name)
    if framework is TestingFramework.UNKNOWN:
        if cfg["strict"]:
            raise UnknownFrameworkError(name)
        logger.warning("Configured testing framework '{name}' is not recognized", name=name)
        return None

    return get_for_framework(framework)
