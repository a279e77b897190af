"""Domain model types for parsed playlists.

These dataclasses are the parser's output contract. Both are frozen: a
playlist handed back by :func:`m3uview.m3u.parser.parse` is owned by the
caller and never touched again by the parser.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterator, List, Tuple

LIVE_DURATION = -1


@dataclass(frozen=True)
class Entry:
    """One playable item from an #EXTINF directive and its source line."""
    source: str
    title: str = ""
    duration: int = LIVE_DURATION

    @property
    def is_live(self) -> bool:
        """True when the duration is the unknown/live sentinel."""
        return self.duration == LIVE_DURATION

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (field order: source, title, duration)."""
        return asdict(self)


@dataclass(frozen=True)
class Playlist:
    """Ordered, immutable sequence of entries in source-document order."""
    entries: Tuple[Entry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    @property
    def total_duration(self) -> int:
        """Sum of known durations in seconds (live entries are skipped)."""
        return sum(e.duration for e in self.entries if not e.is_live)

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.entries]


__all__ = ["Entry", "Playlist", "LIVE_DURATION"]
