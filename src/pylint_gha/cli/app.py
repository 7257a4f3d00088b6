# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .. import __version__
from .run import run_command

app = typer.Typer(help="Run pylint and report its messages as GitHub annotations.", no_args_is_help=True)
app.command(name="run")(run_command)


def _print_version(value: bool) -> None:
    """Print the installed version and exit when ``--version`` is given.

    Args:
        value: Whether the flag was supplied.

    Raises:
        typer.Exit: When ``value`` is true.
    """

    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show the installed version and exit.",
    ),
) -> None:
    """Pylint GitHub annotation bridge."""


__all__ = ["app"]
