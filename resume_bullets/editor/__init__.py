"""Editor state for a single resume editing session."""

from .session import EditorSession, default_sections, sample_resume

__all__ = ["EditorSession", "default_sections", "sample_resume"]
