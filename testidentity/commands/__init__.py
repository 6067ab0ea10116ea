"""CLI commands for testidentity."""
