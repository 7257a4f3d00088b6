# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shell-free subprocess execution with incremental stdout capture."""

from __future__ import annotations

import logging
import shutil

# Bandit: subprocess usage is intentional; arguments are passed as a list and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

logger = logging.getLogger(__name__)

CHUNK_SIZE: Final[int] = 64 * 1024


@dataclass(slots=True, frozen=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = True


@dataclass(slots=True, frozen=True)
class StreamedProcess:
    """Exit status and accumulated stdout of a finished command."""

    args: tuple[str, ...]
    returncode: int
    stdout: str


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(self, command: Sequence[str], returncode: int, stdout: str | None) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            command: Normalised command sequence that was executed.
            returncode: Exit status reported by the subprocess.
            stdout: Captured standard output stream.
        """
        super().__init__(f"Command '{command[0]}' failed with exit code {returncode}")
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Resolve the executable in ``args`` against ``PATH``.

    Args:
        args: Raw command arguments supplied by the caller.

    Returns:
        list[str]: Argument list whose head is an absolute executable path.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be found on ``PATH``.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def stream_command(args: Sequence[str], *, options: CommandOptions | None = None) -> StreamedProcess:
    """Execute ``args`` and accumulate stdout chunks in arrival order.

    Standard error is not captured and flows to the parent's stderr. The
    buffer is returned untouched; interpreting it is the caller's job.

    Args:
        args: Command and argument sequence to execute.
        options: Working directory, environment and ``check`` behaviour.

    Returns:
        StreamedProcess: Exit status and the complete stdout text.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        SubprocessExecutionError: When ``check`` is true and the process exits
            with a non-zero status.
    """

    normalized = _normalize_args(args)
    resolved_options = options or CommandOptions()
    chunks: list[str] = []

    # Bandit: argument list passed directly, no shell expansion.
    with subprocess.Popen(  # nosec B603
        normalized,
        cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
        env=dict(resolved_options.env) if resolved_options.env is not None else None,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
    ) as process:
        stream = process.stdout
        if stream is None:
            raise RuntimeError("subprocess stdout pipe is unavailable")
        while chunk := stream.read(CHUNK_SIZE):
            chunks.append(chunk)
        returncode = process.wait()

    stdout = "".join(chunks)
    logger.debug("%s exited with %d after %d stdout chunk(s)", normalized[0], returncode, len(chunks))
    if resolved_options.check and returncode != 0:
        raise SubprocessExecutionError(normalized, returncode, stdout)
    return StreamedProcess(args=tuple(normalized), returncode=returncode, stdout=stdout)


__all__ = [
    "CHUNK_SIZE",
    "CommandOptions",
    "StreamedProcess",
    "SubprocessExecutionError",
    "stream_command",
]
