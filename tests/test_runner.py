# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for launching pylint and interpreting its exit status."""

from __future__ import annotations

import sys
from concurrent.futures import Future
from pathlib import Path

import pytest

from pylint_gha.process import SubprocessExecutionError
from pylint_gha.runner import (
    PYLINT_EXECUTABLE,
    USAGE_ERROR_EXIT_CODE,
    PylintRun,
    PylintRunner,
    ToolUsageError,
    exit_code_from_error,
)


def test_defaults() -> None:
    assert PYLINT_EXECUTABLE == "pylint"
    assert USAGE_ERROR_EXIT_CODE == 32
    assert PylintRunner().executable == "pylint"


def test_clean_run(fake_runner, recorded_argv) -> None:
    run = fake_runner(exit_code=0, stdout="[]").run(["src", "--output-format=json"])

    assert run == PylintRun(args=("src", "--output-format=json"), returncode=0, stdout="[]")
    assert not run.found_issues
    assert recorded_argv() == ["src", "--output-format=json"]


@pytest.mark.parametrize("exit_code", [1, 2, 4, 16, 28])
def test_non_usage_failures_return_buffer(fake_runner, exit_code: int) -> None:
    run = fake_runner(exit_code=exit_code, stdout='[{"a": 1}]').run(["src"])

    assert run.found_issues
    assert run.returncode == exit_code
    assert run.stdout == '[{"a": 1}]'


def test_usage_error_raises_regardless_of_output(fake_runner) -> None:
    runner = fake_runner(exit_code=32, stdout='[{"type": "error"}]')

    with pytest.raises(ToolUsageError) as excinfo:
        runner.run(["--bogus-flag"])

    assert excinfo.value.returncode == 32
    assert excinfo.value.args_used == ("--bogus-flag",)
    assert isinstance(excinfo.value.__cause__, SubprocessExecutionError)


def test_submit_returns_future(fake_runner) -> None:
    future = fake_runner(exit_code=2, stdout="[]").submit(["src"])

    assert isinstance(future, Future)
    assert future.result().returncode == 2


def test_usage_error_surfaces_through_future(fake_runner) -> None:
    future = fake_runner(exit_code=32).submit(["src"])

    with pytest.raises(ToolUsageError):
        future.result()


def test_missing_executable_surfaces_through_future() -> None:
    future = PylintRunner("definitely-not-a-real-pylint-binary").submit([])

    with pytest.raises(FileNotFoundError):
        future.result()


def test_exit_code_prefers_typed_field() -> None:
    error = SubprocessExecutionError(["pylint"], 32, "")

    assert exit_code_from_error(error) == 32


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("The process '/usr/bin/pylint' failed with exit code 32", 32),
        ("Command 'pylint' exited with status 4", 4),
        ("something unrelated", None),
    ],
)
def test_exit_code_falls_back_to_message(message: str, expected: int | None) -> None:
    assert exit_code_from_error(RuntimeError(message)) == expected


def test_working_directory_is_passed_to_pylint(tmp_path) -> None:
    runner = PylintRunner(sys.executable, cwd=tmp_path)

    run = runner.run(["-c", "import os; print(os.getcwd())"])

    assert run.returncode == 0
    assert Path(run.stdout.strip()).resolve() == tmp_path.resolve()
