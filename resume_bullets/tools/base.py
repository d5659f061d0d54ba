"""Base tool class for bullet lint tools."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..config import LintConfig
from ..observability import LintObserver


@dataclass
class ToolResult:
    """Result from a tool execution."""
    success: bool
    output: str
    error: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def to_message(self) -> str:
        if self.success:
            return self.output
        return f"Error: {self.error}\n{self.output}" if self.output else f"Error: {self.error}"


class BaseTool(ABC):
    """Base class for lint tools.

    Tools share one :class:`LintConfig` for thresholds and report each run
    to an optional :class:`LintObserver`.
    """

    name: str
    description: str
    parameters: Dict[str, Any]

    def __init__(self, config: Optional[LintConfig] = None, observer: Optional[LintObserver] = None):
        self.config = config or LintConfig()
        self.observer = observer

    @abstractmethod
    async def execute(self, **kwargs) -> ToolResult:
        """Execute the tool with given parameters."""
        pass

    def to_schema(self) -> Dict[str, Any]:
        """Convert tool to OpenAI/Anthropic function schema."""
        properties = {
            key: {k: v for k, v in spec.items() if k != "required"} for key, spec in self.parameters.items()
        }
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": properties,
                    "required": [k for k, v in self.parameters.items() if v.get("required", False)],
                },
            },
        }

    def _record(self, args: Dict[str, Any], result: ToolResult, started: float, issue_count: int = 0) -> ToolResult:
        """Report a finished run to the observer and hand the result back."""
        duration_ms = (time.perf_counter() - started) * 1000
        if self.observer is None:
            return result
        if result.success:
            self.observer.log_tool_call(self.name, args, result.output, duration_ms, issue_count=issue_count)
        else:
            self.observer.log_error("tool_execution", result.error or "", context={"tool": self.name, **args})
        return result
