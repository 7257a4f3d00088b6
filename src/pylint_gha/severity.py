# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class PylintSeverity(str, Enum):
    """Message categories reported in the ``type`` field of pylint JSON output."""

    ERROR = "error"
    WARNING = "warning"
    CONVENTION = "convention"
    REFACTOR = "refactor"
    INFO = "info"


class AnnotationLevel(str, Enum):
    """Annotation channels understood by GitHub Actions."""

    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"


# Summary order: error, warning, convention, refactor, info.
SUMMARY_ORDER: Final[tuple[PylintSeverity, ...]] = (
    PylintSeverity.ERROR,
    PylintSeverity.WARNING,
    PylintSeverity.CONVENTION,
    PylintSeverity.REFACTOR,
    PylintSeverity.INFO,
)

# Annotation order: errors, then the warning channel (warning, refactor,
# convention), then infos.
EMISSION_ORDER: Final[tuple[PylintSeverity, ...]] = (
    PylintSeverity.ERROR,
    PylintSeverity.WARNING,
    PylintSeverity.REFACTOR,
    PylintSeverity.CONVENTION,
    PylintSeverity.INFO,
)

_SEVERITY_TO_LEVEL: Final[dict[PylintSeverity, AnnotationLevel]] = {
    PylintSeverity.ERROR: AnnotationLevel.ERROR,
    PylintSeverity.WARNING: AnnotationLevel.WARNING,
    PylintSeverity.CONVENTION: AnnotationLevel.WARNING,
    PylintSeverity.REFACTOR: AnnotationLevel.WARNING,
    PylintSeverity.INFO: AnnotationLevel.NOTICE,
}


def severity_from_type(label: str | None) -> PylintSeverity | None:
    """Return the :class:`PylintSeverity` whose value equals ``label`` exactly.

    Args:
        label: Raw ``type`` value taken from a pylint message.

    Returns:
        PylintSeverity | None: Matching severity, or ``None`` for labels outside
        the vocabulary (including case variants such as ``"Error"``).
    """

    if label is None:
        return None
    try:
        return PylintSeverity(label)
    except ValueError:
        return None


def annotation_level(severity: PylintSeverity) -> AnnotationLevel:
    """Map a pylint severity onto the annotation channel used to report it."""

    return _SEVERITY_TO_LEVEL[severity]


__all__ = [
    "AnnotationLevel",
    "EMISSION_ORDER",
    "PylintSeverity",
    "SUMMARY_ORDER",
    "annotation_level",
    "severity_from_type",
]
