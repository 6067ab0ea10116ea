"""Centralized error handler for testidentity commands."""

import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any

import click

from testidentity.utils.logging import logger

from .constants import ERROR_LOG_FILE


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that logs unexpected command failures and reports them through click.

    The error log is written under the command's ``project_path`` option when it
    has one, otherwise under the current directory.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit):
            raise
        except Exception as e:
            error_type = type(e).__name__
            error_msg = str(e)

            logger.opt(exception=True).error(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=error_msg,
            )

            error_log_path = Path(kwargs.get("project_path") or ".") / ERROR_LOG_FILE
            error_log_path.parent.mkdir(parents=True, exist_ok=True)
            with open(error_log_path, "a", encoding="utf-8") as f:
                f.write("\n" + "=" * 80 + "\n")
                f.write(f"[{datetime.now().isoformat()}] Error in command: {func.__name__}\n")
                f.write("=" * 80 + "\n")
                f.write(f"{error_type}: {error_msg}\n\n")
                f.write(traceback.format_exc())
                f.write("=" * 80 + "\n\n")

            raise click.ClickException(
                f"{error_type}: {error_msg}\n\nFull traceback logged to: {error_log_path}"
            ) from e

    return wrapper
