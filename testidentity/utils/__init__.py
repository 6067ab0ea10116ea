"""testidentity utilities package."""

from .constants import ENV_LOG_JSON, ENV_LOG_LEVEL, ENV_PREFIX, ERROR_LOG_FILE
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .logging import configure_logging, logger

__all__ = [
    "ERROR_LOG_FILE",
    "ENV_PREFIX",
    "ENV_LOG_LEVEL",
    "ENV_LOG_JSON",
    "handle_exceptions",
    "ExitCodes",
    "configure_logging",
    "logger",
]
