"""Internal parsing utilities for the bullet linter."""

from .ast_parser import LineKind, ResumeAst, classify_line, normalize_section_name, parse_resume_ast

__all__ = [
    "LineKind",
    "ResumeAst",
    "classify_line",
    "normalize_section_name",
    "parse_resume_ast",
]
