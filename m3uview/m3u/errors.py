"""Parse error taxonomy for M3U documents.

Every error carries the 1-based ``line`` it refers to (counted against the
trimmed document) and a human readable ``message``. ``code`` is a stable
identifier callers can switch on without importing every subclass.
"""
from __future__ import annotations


class ParseError(ValueError):
    """Base class for all playlist parse failures."""

    code = "ParseError"

    def __init__(self, line: int, message: str):
        self.line = line
        self.message = message
        super().__init__(f"line {line}: {message}")


class MissingHeaderError(ParseError):
    code = "MissingHeader"

    def __init__(self, found: str):
        self.found = found
        super().__init__(1, f"expected '#EXTM3U' header, found {found!r}")


class DuplicateDirectiveError(ParseError):
    """An #EXTINF directive arrived while another one was still pending."""

    code = "DuplicateDirective"

    def __init__(self, line: int, pending_line: int):
        self.pending_line = pending_line
        super().__init__(
            line,
            f"#EXTINF directive while directive from line {pending_line} has no source yet",
        )


class MalformedDirectiveError(ParseError):
    code = "MalformedDirective"

    def __init__(self, line: int, field_count: int):
        self.field_count = field_count
        super().__init__(
            line,
            f"#EXTINF expects 2 comma-separated fields (duration,title), found {field_count}",
        )


class InvalidDurationError(ParseError):
    code = "InvalidDuration"

    def __init__(self, line: int, value: str):
        self.value = value
        super().__init__(line, f"invalid duration {value!r} (expected integer seconds or -1)")


class TruncatedEntryError(ParseError):
    """Document ended before the pending directive received its source line."""

    code = "TruncatedEntry"

    def __init__(self, line: int):
        super().__init__(line, "#EXTINF directive is not followed by a source line")


class OrphanSourceError(ParseError):
    """Strict mode only: a source line without a preceding #EXTINF directive."""

    code = "OrphanSource"

    def __init__(self, line: int, source: str):
        self.source = source
        super().__init__(line, f"source line {source!r} has no #EXTINF directive")


__all__ = [
    "ParseError",
    "MissingHeaderError",
    "DuplicateDirectiveError",
    "MalformedDirectiveError",
    "InvalidDurationError",
    "TruncatedEntryError",
    "OrphanSourceError",
]
