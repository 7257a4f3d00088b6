# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run pylint once and report its findings to an annotation sink."""

from __future__ import annotations

import logging

from .arguments import build_pylint_args
from .config import ActionConfig
from .github import AnnotationSink
from .models import ActionResult
from .parsers import ReportingError, decode_pylint_output
from .reporting import report_results
from .runner import PylintRunner

logger = logging.getLogger(__name__)


def run_action(
    config: ActionConfig,
    *,
    sink: AnnotationSink,
    runner: PylintRunner | None = None,
) -> ActionResult:
    """Execute pylint with the configured arguments and report its messages.

    Args:
        config: Inputs for this run.
        sink: Host surface receiving the run status and annotations.
        runner: Runner used to launch pylint; a default one is created when omitted.

    Returns:
        ActionResult: ``failed`` is ``False`` only when pylint exits with 0.

    Raises:
        ArgumentParseError: If the argument string has malformed quoting.
            Pylint is not launched.
        ToolUsageError: If pylint exits with its usage-error status.
        FileNotFoundError: If the pylint executable is not on ``PATH``.
    """

    args = build_pylint_args(config.pylint_args)
    active_runner = runner if runner is not None else PylintRunner()
    run = active_runner.submit(args).result()
    if not run.found_issues:
        return ActionResult()

    try:
        messages = decode_pylint_output(run.stdout)
    except ReportingError as exc:
        logger.error("pylint exited with status %d", run.returncode)
        logger.error("unable to report pylint messages: %s", exc)
        sink.set_failed(f"pylint exited with status {run.returncode} and its output could not be decoded")
        return ActionResult(failed=True, message=str(exc))

    if not messages:
        # A non-zero exit status fails the run even without messages.
        logger.error("pylint exited with status %d without reporting messages", run.returncode)
        sink.set_failed(f"pylint exited with status {run.returncode}")
        return ActionResult(failed=True, message=f"pylint exited with status {run.returncode}")
    return report_results(messages, run.args, sink)


__all__ = ["run_action"]
