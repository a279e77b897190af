"""Top-level package for m3u-table-view (m3uview).

Version identifier is defined in :mod:`m3uview.version` to keep a single
source of truth that can be imported without pulling heavier submodules.
"""

from .version import __version__  # re-export

__all__ = ["__version__"]
