# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import os
import stat
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from pylint_gha.github import RecordingSink
from pylint_gha.runner import PylintRunner

FAKE_PYLINT = """#!{python}
import json
import os
import sys

argv_file = os.environ.get("FAKE_PYLINT_ARGV")
if argv_file:
    with open(argv_file, "w", encoding="utf-8") as handle:
        json.dump(sys.argv[1:], handle)
sys.stdout.write(os.environ.get("FAKE_PYLINT_STDOUT", ""))
sys.stdout.flush()
sys.exit(int(os.environ.get("FAKE_PYLINT_EXIT", "0")))
"""

MessageFactory = Callable[..., dict[str, Any]]


@pytest.fixture
def make_message() -> MessageFactory:
    """Return a factory building pylint JSON message dictionaries."""

    def factory(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": "warning",
            "module": "pkg.app",
            "obj": "",
            "line": 1,
            "column": 0,
            "endLine": None,
            "endColumn": None,
            "path": "pkg/app.py",
            "symbol": "unused-import",
            "message": "Unused import os",
            "message-id": "W0611",
        }
        payload.update(overrides)
        return payload

    return factory


@pytest.fixture
def sink() -> RecordingSink:
    """Return an in-memory annotation sink."""
    return RecordingSink()


@pytest.fixture
def fake_pylint(tmp_path: Path) -> Path:
    """Write an executable stand-in for pylint driven by ``FAKE_PYLINT_*`` variables."""

    script = tmp_path / "pylint"
    script.write_text(FAKE_PYLINT.format(python=sys.executable), encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def fake_runner(fake_pylint: Path, tmp_path: Path) -> Callable[..., PylintRunner]:
    """Return a factory for runners bound to the fake pylint executable."""

    def factory(*, exit_code: int = 0, stdout: str | list[Any] = "") -> PylintRunner:
        text = stdout if isinstance(stdout, str) else json.dumps(stdout)
        env = {
            **os.environ,
            "FAKE_PYLINT_EXIT": str(exit_code),
            "FAKE_PYLINT_STDOUT": text,
            "FAKE_PYLINT_ARGV": str(tmp_path / "argv.json"),
        }
        return PylintRunner(str(fake_pylint), env=env)

    return factory


@pytest.fixture
def recorded_argv(tmp_path: Path) -> Callable[[], list[str]]:
    """Return a reader for the arguments the fake pylint last received."""

    def reader() -> list[str]:
        return json.loads((tmp_path / "argv.json").read_text(encoding="utf-8"))

    return reader
