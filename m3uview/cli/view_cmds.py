"""Playlist validation and display commands."""

from __future__ import annotations
import click
import logging
import time
from pathlib import Path

from .helpers import cli, effective_config, load_table_or_exit
from ..m3u import ParseError
from ..services.playlist_service import PlaylistFileError, load_playlist
from ..table.formatting import format_duration, render_table
from ..utils.output import count_badge, error, section_header, success

logger = logging.getLogger(__name__)


@cli.command()
@click.argument('playlist', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--columns', '-c', default=None, help='Comma separated columns (default: keys of the first entry)')
@click.option('--strict/--lenient', default=None, help='Reject source lines without #EXTINF (overrides config)')
@click.option('--raw', is_flag=True, help='Show durations as seconds instead of MM:SS')
@click.pass_context
def show(ctx: click.Context, playlist: Path, columns: str | None, strict: bool | None, raw: bool):
    """Show playlist entries as a flattened table."""
    cfg = effective_config(ctx.obj, strict=strict, columns=columns)
    table = load_table_or_exit(ctx, playlist, cfg)

    table_cfg = cfg.get('table', {})
    rows = table.rows
    if not raw and 'duration' in table.columns:
        idx = table.columns.index('duration')
        rows = [row[:idx] + [format_duration(row[idx])] + row[idx + 1:] for row in rows]

    click.echo(section_header(playlist.name))
    if not rows:
        click.echo("No entries found.")
        return
    for line in render_table(
        table.columns,
        rows,
        max_width=table_cfg.get('max_width', 40),
        empty_cell=table_cfg.get('empty_cell', ''),
    ):
        click.echo(line)
    click.echo(f"\nTotal: {count_badge(table.row_count, 'entries')}")


def _check_once(playlist: Path, strict: bool, encoding: str) -> bool:
    try:
        parsed = load_playlist(playlist, strict=strict, encoding=encoding)
    except PlaylistFileError as e:
        click.echo(error(f"Cannot read {e.path}: {e.reason}"))
        return False
    except ParseError as e:
        click.echo(error(f"{playlist.name}: {e} [{e.code}]"))
        return False
    live = sum(1 for entry in parsed if entry.is_live)
    summary = f"{playlist.name}: {count_badge(len(parsed), 'entries')}, total {format_duration(parsed.total_duration)}"
    if live:
        summary += f", {live} live"
    click.echo(success(summary))
    return True


@cli.command()
@click.argument('playlist', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--strict/--lenient', default=None, help='Reject source lines without #EXTINF (overrides config)')
@click.option('--watch', is_flag=True, help='Keep running and re-check whenever the file changes')
@click.option('--debounce', type=float, default=None, help='Debounce time in seconds for watch mode')
@click.pass_context
def check(ctx: click.Context, playlist: Path, strict: bool | None, watch: bool, debounce: float | None):
    """Validate a playlist; exit code 1 if it does not parse."""
    cfg = effective_config(ctx.obj, strict=strict)
    parser_cfg = cfg.get('parser', {})
    strict_mode = parser_cfg.get('strict', False)
    encoding = parser_cfg.get('encoding', 'utf-8-sig')

    ok = _check_once(playlist, strict_mode, encoding)
    if not watch:
        if not ok:
            ctx.exit(1)
        return

    from ..services.watch_service import PlaylistWatcher

    if debounce is None:
        debounce = cfg.get('watch', {}).get('debounce_seconds', 1.0)
    click.echo(click.style("=== Entering watch mode (Ctrl+C to stop) ===", fg="cyan", bold=True))
    with PlaylistWatcher(playlist, lambda p: _check_once(p, strict_mode, encoding), debounce_seconds=debounce):
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            logger.debug("Watch interrupted by user")


__all__ = ["show", "check"]
