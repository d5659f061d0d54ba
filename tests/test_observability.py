"""Tests for the lint observer."""

import logging

from resume_bullets.observability import LintObserver


def test_records_tool_calls():
    observer = LintObserver()
    observer.log_tool_call("bullet_check", {"text": "x"}, "ok" * 200, duration_ms=1.5, issue_count=2)
    observer.log_tool_call("lint_bullets", {"path": "r.md"}, "ok", duration_ms=2.5, issue_count=1)

    stats = observer.get_session_stats()
    assert stats["tool_calls"] == 2
    assert stats["issues_reported"] == 3
    assert stats["total_duration_ms"] == 4.0
    assert len(observer.events[0].data["result"]) == 200


def test_records_errors():
    observer = LintObserver()
    observer.log_error("tool_execution", "boom", context={"tool": "lint_bullets"})
    assert observer.get_session_stats()["errors"] == 1
    assert observer.events[0].data["context"] == {"tool": "lint_bullets"}


def test_verbose_sets_level():
    assert LintObserver(verbose=True).logger.level == logging.INFO
    assert LintObserver().logger.level == logging.WARNING


def test_single_handler():
    LintObserver()
    LintObserver()
    assert len(logging.getLogger("resume_bullets").handlers) == 1


def test_clear():
    observer = LintObserver()
    observer.log_error("x", "y")
    observer.clear()
    assert observer.events == []
