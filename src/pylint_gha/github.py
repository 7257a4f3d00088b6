# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Annotation sinks: GitHub workflow commands and an in-memory recorder."""

from __future__ import annotations

import sys
from typing import Final, Protocol, TextIO, runtime_checkable

from .models import Annotation, AnnotationProperties
from .severity import AnnotationLevel

# Workflow command property names, in the order GitHub documents them.
_PROPERTY_KEYS: Final[tuple[tuple[str, str], ...]] = (
    ("title", "title"),
    ("file", "file"),
    ("start_line", "line"),
    ("end_line", "endLine"),
    ("start_column", "col"),
    ("end_column", "endColumn"),
)


@runtime_checkable
class AnnotationSink(Protocol):
    """Host-platform surface receiving the run status and annotations."""

    def set_failed(self, message: str | None) -> None:
        """Mark the run as failed with an optional explanation."""
        ...

    def error(self, message: str, properties: AnnotationProperties) -> None:
        """Emit an error-channel annotation."""
        ...

    def warning(self, message: str, properties: AnnotationProperties) -> None:
        """Emit a warning-channel annotation."""
        ...

    def notice(self, message: str, properties: AnnotationProperties) -> None:
        """Emit a notice-channel annotation."""
        ...


def escape_data(value: str) -> str:
    """Escape the message part of a workflow command."""

    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: object) -> str:
    """Escape a property value of a workflow command."""

    return escape_data(str(value)).replace(":", "%3A").replace(",", "%2C")


def format_workflow_command(
    level: AnnotationLevel,
    message: str,
    properties: AnnotationProperties | None = None,
) -> str:
    """Render a ``::level props::message`` line.

    Args:
        level: Annotation channel.
        message: Annotation body; newlines are escaped.
        properties: Optional title and location.

    Returns:
        str: The workflow command without a trailing newline.
    """

    rendered = ""
    if properties is not None:
        rendered = ",".join(
            f"{name}={escape_property(getattr(properties, field))}" for field, name in _PROPERTY_KEYS
        )
    if not rendered:
        return f"::{level.value}::{escape_data(message)}"
    return f"::{level.value} {rendered}::{escape_data(message)}"


class GitHubAnnotationSink:
    """Write annotations as GitHub Actions workflow commands."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialise the sink.

        Args:
            stream: Destination for workflow commands; defaults to ``sys.stdout``.
        """

        self._stream = stream if stream is not None else sys.stdout
        self.failed = False
        self.failure_message: str | None = None

    def _write(self, line: str) -> None:
        """Write ``line`` as one newline-terminated command and flush the stream."""

        self._stream.write(f"{line}\n")
        self._stream.flush()

    def set_failed(self, message: str | None) -> None:
        """Record the failure and emit ``message`` as a bare error command when given."""

        self.failed = True
        self.failure_message = message
        if message:
            self._write(format_workflow_command(AnnotationLevel.ERROR, message))

    def error(self, message: str, properties: AnnotationProperties) -> None:
        """Emit an ``::error`` command."""

        self._write(format_workflow_command(AnnotationLevel.ERROR, message, properties))

    def warning(self, message: str, properties: AnnotationProperties) -> None:
        """Emit a ``::warning`` command."""

        self._write(format_workflow_command(AnnotationLevel.WARNING, message, properties))

    def notice(self, message: str, properties: AnnotationProperties) -> None:
        """Emit a ``::notice`` command."""

        self._write(format_workflow_command(AnnotationLevel.NOTICE, message, properties))


class RecordingSink:
    """Keep the status and annotations in memory."""

    def __init__(self) -> None:
        """Initialise an empty recording."""

        self.failed = False
        self.failure_messages: list[str | None] = []
        self.annotations: list[Annotation] = []

    def set_failed(self, message: str | None) -> None:
        """Record a failure and its message."""

        self.failed = True
        self.failure_messages.append(message)

    def _record(self, level: AnnotationLevel, message: str, properties: AnnotationProperties) -> None:
        """Append an :class:`Annotation` for ``level``.

        Args:
            level: Channel the annotation was emitted on.
            message: Annotation body.
            properties: Title and location.
        """

        self.annotations.append(Annotation(level=level, message=message, properties=properties))

    def error(self, message: str, properties: AnnotationProperties) -> None:
        """Record an error-channel annotation."""

        self._record(AnnotationLevel.ERROR, message, properties)

    def warning(self, message: str, properties: AnnotationProperties) -> None:
        """Record a warning-channel annotation."""

        self._record(AnnotationLevel.WARNING, message, properties)

    def notice(self, message: str, properties: AnnotationProperties) -> None:
        """Record a notice-channel annotation."""

        self._record(AnnotationLevel.NOTICE, message, properties)

    def by_level(self, level: AnnotationLevel) -> list[Annotation]:
        """Return recorded annotations emitted on ``level``."""

        return [annotation for annotation in self.annotations if annotation.level is level]


__all__ = [
    "AnnotationSink",
    "GitHubAnnotationSink",
    "RecordingSink",
    "escape_data",
    "escape_property",
    "format_workflow_command",
]
