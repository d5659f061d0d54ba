"""Resume Bullets Tools - Expose bullet checks to an LLM tool-calling loop."""

from .base import BaseTool, ToolResult
from .bullet_tools import BulletCheckTool, BulletLinterTool

__all__ = [
    "BaseTool",
    "ToolResult",
    "BulletCheckTool",
    "BulletLinterTool",
]
