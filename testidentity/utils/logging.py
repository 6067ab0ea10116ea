"""Centralized logging configuration using Loguru with Pino-compatible output.

As a library, testidentity leaves the host's loguru handlers alone and keeps
its own messages disabled. The CLI calls configure_logging() to enable them
and install its console handler.

Usage:
    from testidentity.utils.logging import logger
    logger.debug("Debug message")  # Only shows if TESTIDENTITY_LOG_LEVEL=DEBUG

Environment Variables (read by configure_logging):
    TESTIDENTITY_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    TESTIDENTITY_LOG_JSON: 0|1 (default: 0, human-readable)
"""

import json
import os
import sys

from loguru import logger

from .constants import ENV_LOG_JSON, ENV_LOG_LEVEL

PACKAGE_NAME = "testidentity"

# Pino-compatible numeric levels
PINO_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}

_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.disable(PACKAGE_NAME)


def pino_compatible_sink(message):
    """Format log records as Pino-compatible NDJSON on stdout."""
    record = message.record

    pino_log = {
        "level": PINO_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
    }
    for key, value in record["extra"].items():
        pino_log[key] = value

    if record["exception"]:
        pino_log["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }

    # Never call logger.* inside a sink
    sys.stdout.write(json.dumps(pino_log, default=str) + "\n")
    sys.stdout.flush()


def configure_logging() -> int:
    """Replace all handlers with the testidentity console handler.

    Only for use by an application entry point such as the CLI.

    Returns:
        The id of the added handler.
    """
    log_level = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
    json_mode = os.environ.get(ENV_LOG_JSON, "0") == "1"

    logger.remove()
    logger.enable(PACKAGE_NAME)

    if json_mode:
        return logger.add(
            pino_compatible_sink,
            level=log_level,
            colorize=False,
        )
    return logger.add(
        sys.stderr,
        level=log_level,
        format=_human_format,
        colorize=None,  # colors only on a TTY
    )


__all__ = [
    "logger",
    "configure_logging",
    "pino_compatible_sink",
]
