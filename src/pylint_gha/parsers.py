# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decode pylint JSON output into :class:`PylintMessage` records."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, TypeAlias

from pydantic import ValidationError

from .errors import PylintActionError
from .models import PylintMessage

logger = logging.getLogger(__name__)

JsonValue: TypeAlias = Any


class ReportingError(PylintActionError):
    """Raised when pylint output cannot be turned into messages."""


def iter_dicts(value: JsonValue) -> Iterator[Mapping[str, JsonValue]]:
    """Yield mapping items from ``value`` when it is a sequence of dict-like objects."""

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        for item in value:
            if isinstance(item, Mapping):
                yield item


def _load_json(stdout: str) -> JsonValue:
    """Decode ``stdout`` as a single JSON document.

    Args:
        stdout: Raw text captured from pylint.

    Returns:
        JsonValue: Decoded payload; an empty list for blank output.

    Raises:
        ReportingError: If the text is not valid JSON.
    """

    stdout = stdout.strip()
    if not stdout:
        return []
    try:
        return json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise ReportingError(f"pylint output is not valid JSON: {exc}") from exc


def parse_pylint(payload: JsonValue) -> list[PylintMessage]:
    """Convert a decoded pylint JSON payload into messages.

    Args:
        payload: Value produced by :func:`json.loads` on pylint's stdout.

    Entries lacking a required field are skipped with a warning so the
    remaining messages are still reported.

    Returns:
        list[PylintMessage]: Messages in the order pylint emitted them.

    Raises:
        ReportingError: If the payload is not an array.
    """

    if not isinstance(payload, list):
        raise ReportingError(f"expected a JSON array from pylint, got {type(payload).__name__}")
    messages: list[PylintMessage] = []
    for index, item in enumerate(iter_dicts(payload)):
        try:
            messages.append(PylintMessage.model_validate(item))
        except ValidationError as exc:
            logger.warning("skipping malformed pylint message #%d: %s", index, exc)
    return messages


def decode_pylint_output(stdout: str) -> list[PylintMessage]:
    """Decode the raw stdout buffer of a pylint run.

    An empty or whitespace-only buffer decodes to no messages.

    Raises:
        ReportingError: If the buffer is truncated or otherwise unparsable.
    """

    return parse_pylint(_load_json(stdout))


__all__ = [
    "JsonValue",
    "ReportingError",
    "decode_pylint_output",
    "iter_dicts",
    "parse_pylint",
]
