# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the pylint command line from the action's argument string."""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from typing import Final

from .errors import PylintActionError

OUTPUT_FORMAT_FLAG: Final[str] = "--output-format=json"


class ArgumentParseError(PylintActionError):
    """Raised when the configured argument string has malformed shell quoting."""

    def __init__(self, raw: str, reason: str) -> None:
        """Initialise the error with the rejected input.

        Args:
            raw: Argument string that failed to tokenize.
            reason: Message reported by :mod:`shlex`.
        """

        super().__init__(f"Unable to parse pylint arguments {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


def build_pylint_args(raw: str | None) -> list[str]:
    """Tokenize ``raw`` with POSIX shell rules and request JSON output.

    The JSON flag is appended even when ``raw`` already selects an output
    format; pylint keeps the last occurrence.

    Args:
        raw: Shell-style argument string, possibly empty.

    Returns:
        list[str]: Tokens for pylint ending with :data:`OUTPUT_FORMAT_FLAG`.

    Raises:
        ArgumentParseError: If ``raw`` contains unbalanced quotes or a dangling escape.
    """

    try:
        tokens = shlex.split(raw or "", posix=True)
    except ValueError as exc:
        raise ArgumentParseError(raw or "", str(exc)) from exc
    tokens.append(OUTPUT_FORMAT_FLAG)
    return tokens


def format_args(args: Sequence[str]) -> str:
    """Render ``args`` comma separated, as echoed in the summary title."""

    return ",".join(args)


__all__ = [
    "ArgumentParseError",
    "OUTPUT_FORMAT_FLAG",
    "build_pylint_args",
    "format_args",
]
