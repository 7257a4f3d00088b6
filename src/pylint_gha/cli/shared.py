# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import typer
from rich.logging import RichHandler

from ..console import get_console_manager
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok

PACKAGE_LOGGER = "pylint_gha"


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI colour and emoji settings."""

    use_emoji: bool
    use_color: bool

    def fail(self, message: str) -> None:
        """Log a failure message."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def info(self, message: str) -> None:
        """Log an informational message."""

        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def exit_with(self, error: CLIError) -> None:
        """Report ``error`` and terminate the command with its exit code.

        Raises:
            typer.Exit: Always.
        """

        self.fail(str(error))
        raise typer.Exit(code=error.exit_code)


def configure_logging(*, verbose: bool, use_color: bool = True) -> None:
    """Route package log records to the stderr console; debug records only when ``verbose``."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    if not getattr(logger, "_pylint_gha_configured", False):
        console = get_console_manager().get(color=use_color, emoji=False)
        handler = RichHandler(console=console, show_time=False, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        setattr(logger, "_pylint_gha_configured", True)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


__all__ = ["CLIError", "CLILogger", "PACKAGE_LOGGER", "configure_logging"]
