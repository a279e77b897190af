from __future__ import annotations
import copy
import click
from pathlib import Path
from typing import Any, Dict, List

from ..config import load_config
from ..m3u import ParseError
from ..services.playlist_service import PlaylistFileError, PlaylistTable, load_playlist_table
from ..utils.output import error
from ..version import __version__


def split_columns(value: str | None) -> List[str]:
    """Split a comma separated --columns value, dropping blanks."""
    if not value:
        return []
    return [c.strip() for c in value.split(',') if c.strip()]


def effective_config(cfg: Dict[str, Any], strict: bool | None = None, columns: str | None = None) -> Dict[str, Any]:
    """Copy of cfg with per-command flags applied."""
    result = copy.deepcopy(cfg)
    if strict is not None:
        result.setdefault('parser', {})['strict'] = strict
    if columns:
        result.setdefault('table', {})['columns'] = split_columns(columns)
    return result


def load_table_or_exit(ctx: click.Context, playlist: Path, cfg: Dict[str, Any]) -> PlaylistTable:
    """Load a playlist table, turning read/parse failures into exit code 1."""
    try:
        return load_playlist_table(playlist, cfg)
    except PlaylistFileError as e:
        click.echo(error(f"Cannot read {e.path}: {e.reason}"), err=True)
        ctx.exit(1)
    except ParseError as e:
        click.echo(error(f"{playlist.name}: {e} [{e.code}]"), err=True)
        ctx.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="m3u-table-view")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override configured log level')
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Validate M3U/M3U8 playlists and view their entries as a table.

    \b
    TYPICAL WORKFLOWS:

    \b
    Validate a playlist:
      m3uview check party.m3u8            # Exit code 1 on the first error
      m3uview check party.m3u8 --strict   # Also reject stray source lines
      m3uview check party.m3u8 --watch    # Re-check on every save

    \b
    Inspect entries:
      m3uview show party.m3u8
      m3uview show party.m3u8 --columns title,source

    \b
    Export flattened rows:
      m3uview export party.m3u8 --format csv
      m3uview export party.m3u8 --format json -o out/party.json

    \b
    Configuration comes from M3UVIEW__SECTION__KEY environment variables
    or a .env file (see 'm3uview config').
    """
    if isinstance(ctx.obj, dict):
        if log_level:
            ctx.obj['log_level'] = log_level.upper()
        return
    overrides = {'log_level': log_level.upper()} if log_level else None
    ctx.obj = load_config(overrides)


__all__ = ["cli", "split_columns", "effective_config", "load_table_or_exit"]
