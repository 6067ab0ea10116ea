"""Pytest configuration and fixtures."""
import pytest

from loguru import logger

from testidentity.config_runtime import DEFAULTS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop TESTIDENTITY_* configuration overrides inherited from the shell."""
    for key in DEFAULTS:
        monkeypatch.delenv(f"TESTIDENTITY_{key.upper()}", raising=False)


@pytest.fixture
def write_pyproject(tmp_path):
    """Write a pyproject.toml into tmp_path and return the project root."""

    def _write(content: str):
        (tmp_path / "pyproject.toml").write_text(content, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo handlers installed by configure_logging() during a test."""
    yield
    logger.remove()
    logger.disable("testidentity")
