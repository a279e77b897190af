"""Central version declaration for m3u-table-view.

Update this file when cutting a new release tag. Keep semantic versioning.
The CLI --version flag and pyproject.toml read from here.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
