"""M3U playlist parsing: models, error taxonomy and the parser itself."""

from .errors import (
    ParseError,
    MissingHeaderError,
    DuplicateDirectiveError,
    MalformedDirectiveError,
    InvalidDurationError,
    TruncatedEntryError,
    OrphanSourceError,
)
from .models import Entry, Playlist, LIVE_DURATION
from .parser import parse

__all__ = [
    "parse",
    "Entry",
    "Playlist",
    "LIVE_DURATION",
    "ParseError",
    "MissingHeaderError",
    "DuplicateDirectiveError",
    "MalformedDirectiveError",
    "InvalidDurationError",
    "TruncatedEntryError",
    "OrphanSourceError",
]
