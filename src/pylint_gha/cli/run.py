# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``run`` command: execute pylint and annotate the workflow run."""

from __future__ import annotations

from typing import Annotated

import typer

from ..action import run_action
from ..arguments import ArgumentParseError
from ..config import ConfigError, load_config
from ..github import GitHubAnnotationSink
from ..runner import PylintRunner, ToolUsageError
from .shared import CLIError, CLILogger, configure_logging


def build_runner() -> PylintRunner:
    """Return the runner used by the ``run`` command."""

    return PylintRunner()


def run_command(
    pylint_args: Annotated[
        str | None,
        typer.Option(
            "--pylint-args",
            help="Arguments passed to pylint, shell quoted. Defaults to the INPUT_PYLINT-ARGS input.",
        ),
    ] = None,
    color: Annotated[bool, typer.Option("--color/--no-color", help="Colourise log output.")] = True,
    use_emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Prefix log output with emoji.")] = True,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Emit debug logging.")] = False,
) -> None:
    """Run pylint and report its messages as GitHub annotations.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    sink = GitHubAnnotationSink()
    try:
        config = load_config(pylint_args=pylint_args, use_color=color, use_emoji=use_emoji)
    except ConfigError as exc:
        sink.set_failed(str(exc))
        CLILogger(use_emoji=use_emoji, use_color=color).exit_with(CLIError(f"Invalid configuration: {exc}"))
        return

    configure_logging(verbose=verbose, use_color=config.use_color)
    logger = CLILogger(use_emoji=config.use_emoji, use_color=config.use_color)
    logger.info(f"Running pylint with arguments: {config.pylint_args or '<none>'}")
    try:
        result = run_action(config, sink=sink, runner=build_runner())
    except (ArgumentParseError, ToolUsageError, FileNotFoundError) as exc:
        sink.set_failed(str(exc))
        logger.exit_with(CLIError(str(exc)))
        return

    if result.failed:
        logger.fail(f"pylint reported problems ({result.annotations} annotation(s))")
        raise typer.Exit(code=1)
    logger.ok("pylint found no issues")
    raise typer.Exit(code=0)


__all__ = ["build_runner", "run_command"]
