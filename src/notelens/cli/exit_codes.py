"""
Standardized exit codes for NoteLens CLI commands.

Scripts calling ``notelens`` can rely on these codes.
"""

import typer
from rich import print

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_USER_CANCEL = 130  # Standard for SIGINT (Ctrl+C)


class CliExit(typer.Exit):
    """
    CLI exit exception that extends typer.Exit with consistent codes.

    Usage:
        raise CliExit.error("Notes file is not a JSON list")
        raise CliExit.config_error("Unknown setting")
    """

    def __init__(self, code: int, message: str | None = None):
        self.message = message
        super().__init__(code)
        if message:
            color = "green" if code == EXIT_SUCCESS else "red"
            print(f"[{color}]{message}[/{color}]")

    @classmethod
    def success(cls, message: str | None = None) -> "CliExit":
        return cls(EXIT_SUCCESS, message)

    @classmethod
    def error(cls, message: str | None = None) -> "CliExit":
        return cls(EXIT_ERROR, message)

    @classmethod
    def config_error(cls, message: str | None = None) -> "CliExit":
        return cls(EXIT_CONFIG_ERROR, message)

    @classmethod
    def user_cancel(cls, message: str | None = None) -> "CliExit":
        return cls(EXIT_USER_CANCEL, message or "Operation cancelled by user")
