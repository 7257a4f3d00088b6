# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Partition pylint messages into severity buckets."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .models import PylintMessage
from .severity import SUMMARY_ORDER, PylintSeverity, severity_from_type

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SeverityBuckets:
    """Messages grouped by ``type``, each bucket in input order."""

    errors: tuple[PylintMessage, ...] = ()
    warnings: tuple[PylintMessage, ...] = ()
    conventions: tuple[PylintMessage, ...] = ()
    refactors: tuple[PylintMessage, ...] = ()
    infos: tuple[PylintMessage, ...] = ()
    unrecognised: tuple[PylintMessage, ...] = ()

    def bucket(self, severity: PylintSeverity) -> tuple[PylintMessage, ...]:
        """Return the bucket holding messages of ``severity``."""
        return {
            PylintSeverity.ERROR: self.errors,
            PylintSeverity.WARNING: self.warnings,
            PylintSeverity.CONVENTION: self.conventions,
            PylintSeverity.REFACTOR: self.refactors,
            PylintSeverity.INFO: self.infos,
        }[severity]

    def iter_buckets(self) -> Iterator[tuple[PylintSeverity, tuple[PylintMessage, ...]]]:
        """Yield ``(severity, messages)`` pairs in summary order."""
        for severity in SUMMARY_ORDER:
            yield severity, self.bucket(severity)

    @property
    def total(self) -> int:
        """Number of messages held across the five buckets."""
        return sum(len(messages) for _, messages in self.iter_buckets())


def classify_messages(messages: Iterable[PylintMessage]) -> SeverityBuckets:
    """Split ``messages`` into buckets by exact match on their ``type``.

    Messages whose type is outside the pylint vocabulary are kept apart in
    ``unrecognised`` and are never reported.

    Args:
        messages: Messages in pylint's emission order.

    Returns:
        SeverityBuckets: The partitioned messages.
    """

    grouped: dict[PylintSeverity | None, list[PylintMessage]] = {severity: [] for severity in SUMMARY_ORDER}
    grouped[None] = []
    for message in messages:
        grouped[severity_from_type(message.type)].append(message)

    if grouped[None]:
        logger.debug(
            "dropping %d message(s) with unrecognised type(s): %s",
            len(grouped[None]),
            sorted({message.type for message in grouped[None]}),
        )
    return SeverityBuckets(
        errors=tuple(grouped[PylintSeverity.ERROR]),
        warnings=tuple(grouped[PylintSeverity.WARNING]),
        conventions=tuple(grouped[PylintSeverity.CONVENTION]),
        refactors=tuple(grouped[PylintSeverity.REFACTOR]),
        infos=tuple(grouped[PylintSeverity.INFO]),
        unrecognised=tuple(grouped[None]),
    )


__all__ = ["SeverityBuckets", "classify_messages"]
