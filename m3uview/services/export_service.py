"""Export service: write a flattened playlist table to CSV or JSON."""

from __future__ import annotations
import csv
import json
import logging
from pathlib import Path
from typing import List

from .playlist_service import PlaylistTable

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("csv", "json")


class ExportResult:
    """Results from an export operation."""

    def __init__(self, path: Path, fmt: str):
        self.path = path
        self.format = fmt
        self.row_count = 0
        self.columns: List[str] = []


def write_csv(csv_path: Path, table: PlaylistTable) -> None:
    """Write header plus one row per record; missing cells are empty."""
    with csv_path.open('w', newline='', encoding='utf-8') as fh:
        writer = csv.writer(fh)
        writer.writerow(table.columns)
        writer.writerows(table.rows)


def write_json(json_path: Path, table: PlaylistTable) -> None:
    """Write the column-resolved rows as a JSON list of objects."""
    data = [dict(zip(table.columns, row)) for row in table.rows]
    json_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding='utf-8')


def default_export_path(directory: Path, playlist_path: Path, fmt: str) -> Path:
    return directory / f"{playlist_path.stem}.{fmt}"


def export_table(table: PlaylistTable, out_path: Path, fmt: str = "csv") -> ExportResult:
    """Write ``table`` to ``out_path`` in the given format.

    Parent directories are created as needed.

    Raises:
        ValueError: unknown format
    """
    fmt = fmt.lower()
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unknown export format '{fmt}'. Available: {', '.join(EXPORT_FORMATS)}")

    out_path.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "csv":
        write_csv(out_path, table)
    else:
        write_json(out_path, table)

    result = ExportResult(out_path, fmt)
    result.row_count = table.row_count
    result.columns = list(table.columns)
    logger.debug(f"Exported {result.row_count} rows to {out_path}")
    return result


__all__ = ["ExportResult", "EXPORT_FORMATS", "export_table", "default_export_path", "write_csv", "write_json"]
