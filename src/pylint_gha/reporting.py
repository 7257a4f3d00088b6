# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn classified pylint messages into a summary and annotations."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .arguments import format_args
from .classify import SeverityBuckets, classify_messages
from .github import AnnotationSink
from .models import ActionResult, AnnotationProperties, PylintMessage
from .severity import EMISSION_ORDER, AnnotationLevel, annotation_level

Emitter = Callable[[str, AnnotationProperties], None]

SUMMARY_TITLE = "Pylint linter issues detected: (options '{args}')"


def summary_counts(buckets: SeverityBuckets) -> list[str]:
    """Return ``"<count> <severity>"`` for each non-empty bucket in summary order."""

    return [f"{len(messages)} {severity.value}" for severity, messages in buckets.iter_buckets() if messages]


def build_summary(buckets: SeverityBuckets, args: Sequence[str]) -> str:
    """Build the failure message shown for the run.

    Args:
        buckets: Classified pylint messages.
        args: Exact arguments pylint was invoked with.

    Returns:
        str: Title line followed by the bucket counts, separated by blank lines.
    """

    lines = [SUMMARY_TITLE.format(args=format_args(args)), *summary_counts(buckets)]
    return "\n\n".join(lines)


def annotation_properties(message: PylintMessage) -> AnnotationProperties:
    """Map a pylint message onto a single-position annotation location."""

    return AnnotationProperties(
        title=f"Linter {message.type} {message.message_id} ({message.symbol})",
        file=message.path,
        start_line=message.line,
        end_line=message.line,
        start_column=message.column,
        end_column=message.column,
    )


def annotation_message(message: PylintMessage) -> str:
    """Render the annotation body: the message, a blank line and its context."""

    return f"{message.message}\n\n{message.context} ({message.path}:{message.line}:{message.column})"


def _channel(sink: AnnotationSink, level: AnnotationLevel) -> Emitter:
    """Return the sink method that emits annotations on ``level``.

    Args:
        sink: Host surface receiving annotations.
        level: Annotation channel to resolve.

    Returns:
        Emitter: Bound sink method for the channel.
    """

    return {
        AnnotationLevel.ERROR: sink.error,
        AnnotationLevel.WARNING: sink.warning,
        AnnotationLevel.NOTICE: sink.notice,
    }[level]


def _emit(messages: Iterable[PylintMessage], emit: Emitter) -> int:
    """Emit one annotation per message, preserving input order.

    Args:
        messages: Messages of a single severity.
        emit: Sink method for the severity's channel.

    Returns:
        int: Number of annotations emitted.
    """

    count = 0
    for message in messages:
        emit(annotation_message(message), annotation_properties(message))
        count += 1
    return count


def report_results(
    messages: Sequence[PylintMessage],
    args: Sequence[str],
    sink: AnnotationSink,
) -> ActionResult:
    """Fail the run and annotate each message.

    The run is marked failed exactly once, before the first annotation.
    Errors are emitted first, then warnings, refactors and conventions on the
    warning channel, then infos as notices.

    Args:
        messages: Decoded pylint messages.
        args: Arguments pylint was invoked with, echoed in the summary.
        sink: Host surface receiving status and annotations.

    Returns:
        ActionResult: Failure status, summary and the number of annotations.
    """

    if not messages:
        return ActionResult()

    buckets = classify_messages(messages)
    summary = build_summary(buckets, args)
    sink.set_failed(summary)

    emitted = 0
    for severity in EMISSION_ORDER:
        emitted += _emit(buckets.bucket(severity), _channel(sink, annotation_level(severity)))

    return ActionResult(
        failed=True,
        message=summary,
        annotations=emitted,
        counts={severity.value: len(bucket) for severity, bucket in buckets.iter_buckets() if bucket},
    )


__all__ = [
    "SUMMARY_TITLE",
    "annotation_message",
    "annotation_properties",
    "build_summary",
    "report_results",
    "summary_counts",
]
