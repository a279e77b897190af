"""Module entry point for `python -m m3uview.cli`."""
import sys

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    # Playlist titles are often non-ASCII; avoid UnicodeEncodeError on Windows consoles
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")

    from m3uview.cli import cli

    cli()
