"""Playlist service: read a playlist file and turn it into a display table.

This is the boundary between the filesystem and the pure parser/normalizer:
file reading and byte decoding happen here, parsing and flattening do not.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..m3u import Playlist, parse
from ..table.normalizer import FlatRecord, OVERWRITE, flatten_all, infer_columns, to_rows

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8-sig"


class PlaylistFileError(Exception):
    """Playlist file could not be read or decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


@dataclass
class PlaylistTable:
    """Flattened entries plus the columns used to display them."""
    columns: List[str] = field(default_factory=list)
    records: List[FlatRecord] = field(default_factory=list)
    rows: List[List[Any]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)


def read_playlist_text(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read and decode a playlist file.

    The default ``utf-8-sig`` codec strips a leading byte order mark, which
    would otherwise break the header check.

    Raises:
        PlaylistFileError: file missing, unreadable or not decodable
    """
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise PlaylistFileError(path, f"cannot decode as {encoding}: {e.reason}") from e
    except LookupError as e:
        raise PlaylistFileError(path, f"unknown encoding '{encoding}'") from e
    except OSError as e:
        raise PlaylistFileError(path, e.strerror or str(e)) from e


def load_playlist(path: Path, strict: bool = False, encoding: str = DEFAULT_ENCODING) -> Playlist:
    """Read and parse a playlist file.

    Raises:
        PlaylistFileError: file could not be read
        ParseError: document is not a valid extended M3U playlist
    """
    text = read_playlist_text(path, encoding)
    playlist = parse(text, strict=strict)
    logger.debug(f"Parsed {len(playlist)} entries from {path}")
    return playlist


def build_table(
    records: Sequence[Any],
    columns: Sequence[str] | None = None,
    on_collision: str = OVERWRITE,
) -> PlaylistTable:
    """Flatten records and resolve them against display columns.

    Args:
        records: Entries (or any nested records) in display order
        columns: Explicit column names; inferred from the first record if empty
        on_collision: Flatten collision mode ("overwrite" or "error")

    Returns:
        PlaylistTable with one row per record
    """
    flat = flatten_all(records, on_collision)
    cols = list(columns) if columns else infer_columns(flat)
    if flat and not columns:
        missing = {k for rec in flat[1:] for k in rec} - set(cols)
        if missing:
            logger.debug(f"Keys absent from first record have no column: {', '.join(sorted(missing))}")
    return PlaylistTable(columns=cols, records=flat, rows=to_rows(flat, cols))


def load_playlist_table(path: Path, cfg: Dict[str, Any]) -> PlaylistTable:
    """Load a playlist file and build its table using config settings.

    Args:
        path: Playlist file
        cfg: Configuration dict (parser, normalizer and table sections)
    """
    parser_cfg = cfg.get('parser', {})
    playlist = load_playlist(
        path,
        strict=parser_cfg.get('strict', False),
        encoding=parser_cfg.get('encoding', DEFAULT_ENCODING),
    )
    table = build_table(
        playlist.entries,
        columns=cfg.get('table', {}).get('columns') or None,
        on_collision=cfg.get('normalizer', {}).get('on_collision', OVERWRITE),
    )
    logger.info(f"Loaded {table.row_count} entries with {len(table.columns)} columns from {path.name}")
    return table


__all__ = [
    "PlaylistFileError",
    "PlaylistTable",
    "read_playlist_text",
    "load_playlist",
    "build_table",
    "load_playlist_table",
]
