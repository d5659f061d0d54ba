"""Date display helpers for resume templates.

Dates are entered as free text; only a handful of numeric shapes are
rewritten, everything else is shown as typed.
"""

from __future__ import annotations

import re
from datetime import date

EN_DASH = "–"
RANGE_SEPARATOR = f" {EN_DASH} "

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_YEAR_RANGE_RE = re.compile(r"^(\d{4})-(\d{4})$")
_YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")
_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def format_date(value: str) -> str:
    """Format a single date string for display.

    ``"2023-01"`` becomes ``"Jan 2023"``, ``"2020-2023"`` becomes
    ``"2020 – 2023"`` and ``"2023-01-15"`` becomes ``"Jan 15, 2023"``.
    """
    if not value:
        return ""
    text = value.strip()

    match = _YEAR_RANGE_RE.match(text)
    if match:
        return f"{match.group(1)}{RANGE_SEPARATOR}{match.group(2)}"

    match = _YEAR_MONTH_RE.match(text)
    if match:
        month = int(match.group(2))
        if 1 <= month <= 12:
            return f"{MONTH_ABBREVIATIONS[month - 1]} {match.group(1)}"
        return text.replace("-", RANGE_SEPARATOR)

    match = _ISO_DATE_RE.match(text)
    if match:
        try:
            parsed = date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
        except ValueError:
            return text
        return f"{MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.day}, {parsed.year}"

    return text


def format_date_range(start: str, end: str) -> str:
    """Join two dates with an en dash, dropping the separator when one side is blank."""
    formatted_start = format_date(start)
    formatted_end = format_date(end)
    if not formatted_start and not formatted_end:
        return ""
    if not formatted_start or not formatted_end:
        return formatted_start or formatted_end
    return f"{formatted_start}{RANGE_SEPARATOR}{formatted_end}"
