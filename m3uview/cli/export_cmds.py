"""Flat table export command."""

from __future__ import annotations
import click
import logging
from pathlib import Path

from .helpers import cli, effective_config, load_table_or_exit
from ..services.export_service import EXPORT_FORMATS, default_export_path, export_table

logger = logging.getLogger(__name__)


@cli.command()
@click.argument('playlist', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--format', '-f', 'fmt', type=click.Choice(EXPORT_FORMATS, case_sensitive=False), default=None,
              help='Output format (default from config)')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path), default=None,
              help='Output file (default: <export.directory>/<playlist>.<format>)')
@click.option('--columns', '-c', default=None, help='Comma separated columns (default: keys of the first entry)')
@click.option('--strict/--lenient', default=None, help='Reject source lines without #EXTINF (overrides config)')
@click.pass_context
def export(ctx: click.Context, playlist: Path, fmt: str | None, output: Path | None, columns: str | None,
           strict: bool | None):
    """Export flattened playlist entries to CSV or JSON."""
    from ..utils.output import section_header, success, file_path

    cfg = effective_config(ctx.obj, strict=strict, columns=columns)
    export_cfg = cfg.get('export', {})
    fmt = (fmt or export_cfg.get('format', 'csv')).lower()
    if fmt not in EXPORT_FORMATS:
        raise click.UsageError(f"Unknown export format '{fmt}'. Available: {', '.join(EXPORT_FORMATS)}")
    if output is None:
        output = default_export_path(Path(export_cfg.get('directory', 'data/export')), playlist, fmt)

    click.echo(section_header(f"Exporting {playlist.name} as {fmt.upper()}"))
    table = load_table_or_exit(ctx, playlist, cfg)
    result = export_table(table, output, fmt)

    click.echo(success(f"Exported {result.row_count} rows ({len(result.columns)} columns)"))
    click.echo(file_path(result.path, "File"))


__all__ = ['export']
