# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Base exception shared by the action's failure modes."""

from __future__ import annotations


class PylintActionError(RuntimeError):
    """Root of the errors raised while running pylint and reporting its output."""


__all__ = ["PylintActionError"]
