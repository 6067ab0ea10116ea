"""Centralized exit codes for the testidentity CLI."""


class ExitCodes:
    """Standard exit codes for testidentity CLI commands."""

    SUCCESS = 0

    ERROR = 1

    UNKNOWN_FRAMEWORK = 2

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - framework resolved",
            cls.ERROR: "Command failed - see error log",
            cls.UNKNOWN_FRAMEWORK: "Framework name not recognized",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")
