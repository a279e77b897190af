"""Typed configuration dataclasses for m3u-table-view.

Provides strongly-typed configuration objects mirroring the dict returned
by :func:`m3uview.config.load_config`.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any


@dataclass
class ParserConfig:
    """M3U parsing options."""
    strict: bool = False  # Reject source lines without a preceding #EXTINF
    encoding: str = "utf-8-sig"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class NormalizerConfig:
    """Flattening options."""
    on_collision: str = "overwrite"  # "overwrite" or "error"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TableConfig:
    """Terminal table rendering."""
    columns: List[str] = field(default_factory=list)  # Empty: infer from first entry
    max_width: int = 40
    empty_cell: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExportConfig:
    """Flat table export."""
    directory: str = "data/export"
    format: str = "csv"  # "csv" or "json"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class WatchConfig:
    debounce_seconds: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    parser: ParserConfig = field(default_factory=ParserConfig)
    normalizer: NormalizerConfig = field(default_factory=NormalizerConfig)
    table: TableConfig = field(default_factory=TableConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    watch: WatchConfig = field(default_factory=WatchConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary matching the load_config() layout."""
        return {
            "log_level": self.log_level,
            "parser": self.parser.to_dict(),
            "normalizer": self.normalizer.to_dict(),
            "table": self.table.to_dict(),
            "export": self.export.to_dict(),
            "watch": self.watch.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            parser=ParserConfig(**data.get("parser", {})),
            normalizer=NormalizerConfig(**data.get("normalizer", {})),
            table=TableConfig(**data.get("table", {})),
            export=ExportConfig(**data.get("export", {})),
            watch=WatchConfig(**data.get("watch", {})),
        )


__all__ = [
    "AppConfig",
    "ParserConfig",
    "NormalizerConfig",
    "TableConfig",
    "ExportConfig",
    "WatchConfig",
]
