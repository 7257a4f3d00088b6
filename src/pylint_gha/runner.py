# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Launch pylint and interpret its exit status."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .errors import PylintActionError
from .process import CommandOptions, SubprocessExecutionError, stream_command

logger = logging.getLogger(__name__)

PYLINT_EXECUTABLE: Final[str] = "pylint"
USAGE_ERROR_EXIT_CODE: Final[int] = 32

_EXIT_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r"(?:exit code|exited with status)\s+(\d+)")


class ToolUsageError(PylintActionError):
    """Raised when pylint reports that it was invoked incorrectly."""

    def __init__(self, returncode: int, args: Sequence[str]) -> None:
        """Initialise the error with the exit status and offending arguments.

        Args:
            returncode: Exit status reported by pylint.
            args: Arguments pylint was invoked with.
        """

        super().__init__(f"pylint usage error (exit code {returncode}) for arguments {list(args)!r}")
        self.returncode = returncode
        self.args_used = tuple(args)


@dataclass(slots=True, frozen=True)
class PylintRun:
    """Exit status and raw JSON buffer of one pylint invocation."""

    args: tuple[str, ...]
    returncode: int
    stdout: str

    @property
    def found_issues(self) -> bool:
        """Return ``True`` when pylint signalled that messages were emitted."""
        return self.returncode != 0


def exit_code_from_error(error: BaseException) -> int | None:
    """Return the exit code carried by ``error``.

    The typed ``returncode`` attribute wins. The message text is searched only
    for error objects that do not expose one.

    Args:
        error: Failure raised by the process execution layer.

    Returns:
        int | None: Exit code, or ``None`` when it cannot be determined.
    """

    returncode = getattr(error, "returncode", None)
    if isinstance(returncode, int):
        return returncode
    match = _EXIT_CODE_PATTERN.search(str(error))
    if match:
        return int(match.group(1))
    return None


class PylintRunner:
    """Run pylint on a dedicated worker thread and classify its exit status."""

    def __init__(
        self,
        executable: str = PYLINT_EXECUTABLE,
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Initialise the runner.

        Args:
            executable: Name or path of the pylint executable.
            cwd: Working directory for pylint; inherited when ``None``.
            env: Environment for pylint; inherited when ``None``.
        """

        self.executable = executable
        self._options = CommandOptions(cwd=cwd, env=env, check=True)

    def submit(self, args: Sequence[str]) -> Future[PylintRun]:
        """Start pylint with ``args`` and return a future for its outcome.

        The caller is free to do other work until :meth:`Future.result`; no
        timeout is applied.

        Args:
            args: Arguments passed to pylint after the executable name.

        Returns:
            Future[PylintRun]: Resolves to the run, or raises
            :class:`ToolUsageError` / :class:`FileNotFoundError`.
        """

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pylint")
        try:
            return executor.submit(self._execute, tuple(args))
        finally:
            executor.shutdown(wait=False)

    def run(self, args: Sequence[str]) -> PylintRun:
        """Run pylint with ``args`` and block until it exits."""
        return self.submit(args).result()

    def _execute(self, args: tuple[str, ...]) -> PylintRun:
        """Run pylint on the worker thread and wrap its outcome.

        Args:
            args: Arguments passed to pylint after the executable name.

        Returns:
            PylintRun: Exit status and stdout buffer of the invocation.
        """

        logger.debug("running %s %s", self.executable, " ".join(args))
        try:
            completed = stream_command([self.executable, *args], options=self._options)
        except SubprocessExecutionError as exc:
            return self._interpret_failure(exc, args)
        return PylintRun(args=args, returncode=completed.returncode, stdout=completed.stdout)

    @staticmethod
    def _interpret_failure(error: SubprocessExecutionError, args: tuple[str, ...]) -> PylintRun:
        """Map a non-zero pylint exit onto a run or a usage error.

        Args:
            error: Failure raised by the process layer.
            args: Arguments pylint was invoked with.

        Returns:
            PylintRun: Run carrying the captured buffer for reporting.

        Raises:
            ToolUsageError: If pylint exited with its usage-error status.
        """

        returncode = exit_code_from_error(error)
        if returncode == USAGE_ERROR_EXIT_CODE:
            raise ToolUsageError(returncode, args) from error
        # Any other non-zero status means pylint emitted messages.
        return PylintRun(
            args=args,
            returncode=returncode if returncode is not None else 1,
            stdout=error.stdout or "",
        )


__all__ = [
    "PYLINT_EXECUTABLE",
    "PylintRun",
    "PylintRunner",
    "ToolUsageError",
    "USAGE_ERROR_EXIT_CODE",
    "exit_code_from_error",
]
