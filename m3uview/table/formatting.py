"""Cell and table formatting for terminal display."""
from __future__ import annotations
from typing import Any, List, Sequence


def safe_str(value: Any, default: str = "") -> str:
    """Safely convert value to string, returning default if None."""
    return str(value) if value is not None else default


def format_cell(value: Any, empty_cell: str = "", max_width: int | None = None) -> str:
    """Format a single cell for display.

    Booleans render as yes/no, None as ``empty_cell``. Text longer than
    ``max_width`` is cut and ends with an ellipsis.
    """
    if isinstance(value, bool):
        text = "yes" if value else "no"
    else:
        text = safe_str(value, empty_cell)
    if max_width is not None and max_width > 1 and len(text) > max_width:
        text = text[: max_width - 1] + "…"
    return text


def format_duration(seconds: int | None) -> str:
    """Format duration in seconds as MM:SS (``live`` for the -1 sentinel)."""
    if seconds is None:
        return ""
    if seconds == -1:
        return "live"
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def render_table(
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    max_width: int = 40,
    empty_cell: str = "",
) -> List[str]:
    """Render rows as fixed-width text lines (header, divider, rows)."""
    cells = [[format_cell(v, empty_cell, max_width) for v in row] for row in rows]
    widths = [len(col) for col in columns]
    for row in cells:
        for i, text in enumerate(row):
            widths[i] = max(widths[i], len(text))

    lines = ["  ".join(col.ljust(widths[i]) for i, col in enumerate(columns)).rstrip()]
    lines.append("-" * (sum(widths) + 2 * max(len(widths) - 1, 0)))
    for row in cells:
        lines.append("  ".join(text.ljust(widths[i]) for i, text in enumerate(row)).rstrip())
    return lines


__all__ = ["safe_str", "format_cell", "format_duration", "render_table"]
