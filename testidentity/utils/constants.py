"""Centralized constants for the testidentity utils package."""

from pathlib import Path

# ============================================================================
# OUTPUT
# ============================================================================

# Error log written by the CLI error handler, relative to the project root
ERROR_LOG_FILE = Path(".testidentity") / "error.log"

# ============================================================================
# CONFIGURATION
# ============================================================================

# pyproject.toml table holding project configuration: [tool.testidentity]
PYPROJECT_FILE = "pyproject.toml"
PYPROJECT_TOOL_KEY = "testidentity"

# Prefix for configuration overrides, e.g. TESTIDENTITY_FRAMEWORK=xunit
ENV_PREFIX = "TESTIDENTITY_"

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

ENV_LOG_LEVEL = "TESTIDENTITY_LOG_LEVEL"
ENV_LOG_JSON = "TESTIDENTITY_LOG_JSON"
