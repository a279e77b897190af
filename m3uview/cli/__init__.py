"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands.
"""
from m3uview.cli.helpers import cli  # root group
from m3uview.cli import view_cmds  # noqa: F401
from m3uview.cli import export_cmds  # noqa: F401
from m3uview.cli import config_cmds  # noqa: F401

__all__ = ["cli"]
