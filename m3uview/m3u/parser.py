from __future__ import annotations
"""Line-oriented M3U/M3U8 parser.

The parser is a single pass over the lines of an already decoded document.
State is an explicit value threaded through the loop: either ``None`` (idle)
or a :class:`PendingMetadata` holding a parsed #EXTINF directive that still
waits for its source line. Only a complete directive + source pair ever
becomes an :class:`~m3uview.m3u.models.Entry`, and any error aborts the whole
parse, so callers either get every entry or none.

Grammar::

    document  := header (comment | blank | orphan | entry)*
    header    := "#EXTM3U"
    entry     := "#EXTINF:" duration "," title NEWLINE source

Reading files and decoding bytes is left to the service layer.
"""
import re
from dataclasses import dataclass
from typing import List, Optional

from .errors import (
    DuplicateDirectiveError,
    InvalidDurationError,
    MalformedDirectiveError,
    MissingHeaderError,
    OrphanSourceError,
    TruncatedEntryError,
)
from .models import LIVE_DURATION, Entry, Playlist

EXTM3U = "#EXTM3U"
EXTINF = "#EXTINF"
# Reserved: recognized but not parsed into entry fields
EXTALB = "#EXTALB"
EXTART = "#EXTART"

_duration_pattern = re.compile(r"[+-]?[0-9]+", re.ASCII)


@dataclass(frozen=True)
class PendingMetadata:
    """Parsed #EXTINF payload waiting for the source line that follows it."""
    duration: int
    title: str
    line: int


def split_lines(document: str) -> List[str]:
    """Trim the document and split it into physical lines.

    A trailing carriage return on each line is dropped so CRLF files number
    their lines the same way as LF files.
    """
    return [raw.rstrip("\r") for raw in document.strip().split("\n")]


def parse_directive(line: str, line_no: int) -> PendingMetadata:
    """Parse an ``#EXTINF:<duration>,<title>`` line.

    Raises:
        MalformedDirectiveError: payload does not hold exactly two fields
        InvalidDurationError: duration is not base-10 or is negative other than -1
    """
    _, sep, payload = line.partition(":")
    fields = payload.split(",") if sep and payload else []
    if len(fields) != 2:
        raise MalformedDirectiveError(line_no, len(fields))
    duration_txt, title = fields
    return PendingMetadata(
        duration=parse_duration(duration_txt, line_no),
        title=title.strip(),
        line=line_no,
    )


def parse_duration(value: str, line_no: int) -> int:
    txt = value.strip()
    if not _duration_pattern.fullmatch(txt):
        raise InvalidDurationError(line_no, value)
    duration = int(txt, 10)
    if duration < 0 and duration != LIVE_DURATION:
        raise InvalidDurationError(line_no, value)
    return duration


def parse(document: str, strict: bool = False) -> Playlist:
    """Parse M3U text into a :class:`Playlist`.

    Args:
        document: Decoded playlist text.
        strict: Reject non-comment lines that appear without a pending
            #EXTINF directive instead of silently skipping them.

    Returns:
        Playlist with entries in document order.

    Raises:
        ParseError: first structural problem found (see :mod:`m3uview.m3u.errors`).
    """
    lines = split_lines(document)
    if lines[0] != EXTM3U:
        raise MissingHeaderError(lines[0])

    entries: List[Entry] = []
    pending: Optional[PendingMetadata] = None

    for line_no, raw in enumerate(lines[1:], start=2):
        line = raw.strip()
        if line.startswith(EXTINF):
            if pending is not None:
                raise DuplicateDirectiveError(line_no, pending.line)
            pending = parse_directive(line, line_no)
            continue
        if pending is not None:
            # The very next line is the source, even a '#' line; blank means none arrived
            if not line:
                raise TruncatedEntryError(pending.line)
            entries.append(Entry(source=line, title=pending.title, duration=pending.duration))
            pending = None
            continue
        if not line or line.startswith("#"):
            continue
        if strict:
            raise OrphanSourceError(line_no, line)

    if pending is not None:
        raise TruncatedEntryError(pending.line)

    return Playlist(entries=tuple(entries))


__all__ = ["parse", "parse_directive", "parse_duration", "split_lines", "PendingMetadata",
           "EXTM3U", "EXTINF", "EXTALB", "EXTART"]
