# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for summary building and annotation emission."""

from __future__ import annotations

from pylint_gha.classify import classify_messages
from pylint_gha.github import RecordingSink
from pylint_gha.models import AnnotationProperties
from pylint_gha.parsers import decode_pylint_output, parse_pylint
from pylint_gha.reporting import (
    annotation_message,
    annotation_properties,
    build_summary,
    report_results,
    summary_counts,
)
from pylint_gha.severity import AnnotationLevel

ARGS = ["src", "--output-format=json"]


def test_single_error_is_reported(sink: RecordingSink) -> None:
    messages = decode_pylint_output(
        '[{"type":"error","message":"bad","message-id":"E1","symbol":"bad-thing",'
        '"path":"a.py","line":3,"column":1,"obj":"foo"}]'
    )

    result = report_results(messages, ARGS, sink)

    assert result.failed
    assert summary_counts(classify_messages(messages)) == ["1 error"]
    assert result.counts == {"error": 1}
    assert result.annotations == 1
    (annotation,) = sink.annotations
    assert annotation.level is AnnotationLevel.ERROR
    assert annotation.properties == AnnotationProperties(
        title="Linter error E1 (bad-thing)",
        file="a.py",
        start_line=3,
        end_line=3,
        start_column=1,
        end_column=1,
    )
    assert annotation.message == "bad\n\nfoo (a.py:3:1)"


def test_summary_lists_non_empty_buckets_in_fixed_order(make_message) -> None:
    messages = parse_pylint(
        [
            make_message(type="info"),
            make_message(type="convention"),
            make_message(type="convention"),
            make_message(type="error"),
        ]
    )

    summary = build_summary(classify_messages(messages), ARGS)

    assert summary == (
        "Pylint linter issues detected: (options 'src,--output-format=json')"
        "\n\n1 error\n\n2 convention\n\n1 info"
    )


def test_failure_is_set_once_before_annotations(make_message) -> None:
    events: list[str] = []

    class OrderedSink(RecordingSink):
        def set_failed(self, message: str | None) -> None:
            events.append("failed")
            super().set_failed(message)

        def error(self, message: str, properties: AnnotationProperties) -> None:
            events.append("error")
            super().error(message, properties)

        def warning(self, message: str, properties: AnnotationProperties) -> None:
            events.append("warning")
            super().warning(message, properties)

    report_results(parse_pylint([make_message(type="error"), make_message(type="warning")]), ARGS, OrderedSink())

    assert events == ["failed", "error", "warning"]


def test_warning_like_messages_share_the_warning_channel(sink: RecordingSink, make_message) -> None:
    messages = parse_pylint(
        [
            make_message(type="warning", symbol="first"),
            make_message(type="refactor", symbol="second"),
        ]
    )

    report_results(messages, ARGS, sink)

    assert [a.level for a in sink.annotations] == [AnnotationLevel.WARNING, AnnotationLevel.WARNING]
    assert [a.properties.title for a in sink.annotations] == [
        "Linter warning W0611 (first)",
        "Linter refactor W0611 (second)",
    ]


def test_emission_groups_by_severity(sink: RecordingSink, make_message) -> None:
    messages = parse_pylint(
        [
            make_message(type="info", line=1),
            make_message(type="convention", line=2),
            make_message(type="refactor", line=3),
            make_message(type="error", line=4),
            make_message(type="warning", line=5),
        ]
    )

    result = report_results(messages, ARGS, sink)

    assert [(a.level, a.properties.start_line) for a in sink.annotations] == [
        (AnnotationLevel.ERROR, 4),
        (AnnotationLevel.WARNING, 5),
        (AnnotationLevel.WARNING, 3),
        (AnnotationLevel.WARNING, 2),
        (AnnotationLevel.NOTICE, 1),
    ]
    assert result.annotations == 5
    assert len(sink.failure_messages) == 1


def test_no_messages_is_success(sink: RecordingSink) -> None:
    result = report_results([], ARGS, sink)

    assert result.ok
    assert result.message is None
    assert not sink.failed
    assert sink.annotations == []


def test_unknown_types_fail_without_annotations(sink: RecordingSink, make_message) -> None:
    result = report_results(parse_pylint([make_message(type="fatal")]), ARGS, sink)

    assert result.failed
    assert sink.failure_messages == ["Pylint linter issues detected: (options 'src,--output-format=json')"]
    assert sink.annotations == []


def test_body_falls_back_to_module(make_message) -> None:
    (message,) = parse_pylint([make_message(obj="", module="pkg.mod", path="pkg/mod.py", line=7, column=4)])

    assert annotation_message(message) == "Unused import os\n\npkg.mod (pkg/mod.py:7:4)"
    properties = annotation_properties(message)
    assert (properties.start_column, properties.end_column) == (4, 4)
