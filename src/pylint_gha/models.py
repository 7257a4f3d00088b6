# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the pylint_gha package."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .severity import AnnotationLevel


class PylintMessage(BaseModel):
    """A single diagnostic decoded from pylint's ``--output-format=json`` stream."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    type: str
    message: str
    message_id: str = Field(alias="message-id")
    symbol: str
    path: str
    line: int
    column: int
    module: str | None = None
    obj: str | None = None

    @property
    def context(self) -> str:
        """Return the enclosing object name, falling back to the module name."""
        return self.obj or self.module or ""


class AnnotationProperties(BaseModel):
    """Location and title attached to an annotation."""

    model_config = ConfigDict(frozen=True)

    title: str
    file: str
    start_line: int
    end_line: int
    start_column: int
    end_column: int


class Annotation(BaseModel):
    """An annotation as delivered to a sink, kept for inspection."""

    model_config = ConfigDict(frozen=True)

    level: AnnotationLevel
    message: str
    properties: AnnotationProperties


class ActionResult(BaseModel):
    """Outcome of a single action run, translated by the host into a status."""

    model_config = ConfigDict(validate_assignment=True)

    failed: bool = False
    message: str | None = None
    annotations: int = 0
    counts: dict[str, int] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Return ``True`` when the run should be reported as successful."""
        return not self.failed


__all__ = [
    "ActionResult",
    "Annotation",
    "AnnotationProperties",
    "PylintMessage",
]
