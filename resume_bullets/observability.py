"""Observability for lint operations - logging and per-call event records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class LintEvent:
    """A single recorded lint operation."""

    timestamp: datetime
    event_type: str  # "tool_call", "error"
    data: Dict[str, Any]
    duration_ms: Optional[float] = None


class LintObserver:
    """
    Collects events and logs for tool executions.

    One observer is owned by whoever drives the tools (an agent loop, a
    test); there is no global instance.
    """

    def __init__(self, verbose: bool = False):
        self.events: List[LintEvent] = []
        self.logger = logging.getLogger("resume_bullets")
        self.verbose = verbose
        self._setup_logging()

    def _setup_logging(self):
        """Configure logging format and handlers."""
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.logger.setLevel(logging.INFO if self.verbose else logging.WARNING)

    def log_tool_call(
        self,
        tool_name: str,
        args: Dict[str, Any],
        result: str,
        duration_ms: float,
        success: bool = True,
        issue_count: int = 0,
    ):
        """
        Record a tool execution.

        Args:
            tool_name: Name of the tool executed
            args: Arguments passed to the tool
            result: Tool output text
            duration_ms: Execution time in milliseconds
            success: Whether execution succeeded
            issue_count: Number of lint issues reported
        """
        event = LintEvent(
            timestamp=datetime.now(),
            event_type="tool_call",
            data={
                "tool": tool_name,
                "args": args,
                "result": result[:200],
                "success": success,
                "issue_count": issue_count,
            },
            duration_ms=duration_ms,
        )
        self.events.append(event)

        status = "ok" if success else "failed"
        self.logger.info(f"Tool: {tool_name} {status} | {issue_count} issue(s) ({duration_ms:.2f}ms)")

    def log_error(self, error_type: str, message: str, context: Optional[Dict[str, Any]] = None):
        event = LintEvent(
            timestamp=datetime.now(),
            event_type="error",
            data={"error_type": error_type, "message": message, "context": context or {}},
        )
        self.events.append(event)
        self.logger.error(f"Error ({error_type}): {message}")

    def get_session_stats(self) -> Dict[str, Any]:
        """Aggregate statistics over recorded events."""
        tool_calls = [e for e in self.events if e.event_type == "tool_call"]
        errors = [e for e in self.events if e.event_type == "error"]
        return {
            "event_count": len(self.events),
            "tool_calls": len(tool_calls),
            "errors": len(errors),
            "issues_reported": sum(e.data.get("issue_count", 0) for e in tool_calls),
            "total_duration_ms": sum(e.duration_ms or 0 for e in self.events),
        }

    def clear(self):
        """Clear all recorded events."""
        self.events.clear()
        self.logger.info("Observer events cleared")
