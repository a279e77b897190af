"""Watch service for re-validating a playlist file when it changes.

Uses the watchdog library. Editors often write a file several times in a
row (temp file, rename, touch), so events are debounced: the callback runs
once after a quiet period.
"""

from __future__ import annotations
import logging
from pathlib import Path
from threading import Timer, Lock
from typing import Callable
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler, FileSystemEvent

logger = logging.getLogger(__name__)


class DebouncedPlaylistHandler(FileSystemEventHandler):
    """Filesystem event handler that reacts to a single playlist file.

    Events for other files in the same directory are ignored.
    """

    def __init__(
        self,
        playlist_path: Path,
        on_change_callback: Callable[[Path], None],
        debounce_seconds: float = 1.0
    ):
        self.playlist_path = playlist_path.resolve()
        self.on_change = on_change_callback
        self.debounce_seconds = debounce_seconds
        self.timer: Timer | None = None
        self.pending = False
        self.lock = Lock()

    def _is_target(self, event: FileSystemEvent) -> bool:
        candidates = [event.src_path, getattr(event, 'dest_path', '')]
        for raw in candidates:
            if raw and Path(raw).resolve() == self.playlist_path:
                return True
        return False

    def on_any_event(self, event: FileSystemEvent) -> None:
        """Queue a re-check and reset the debounce timer."""
        if event.is_directory or not self._is_target(event):
            return

        logger.debug(f"[watch] {event.event_type}: {self.playlist_path}")

        with self.lock:
            self.pending = True
            if self.timer:
                self.timer.cancel()
            self.timer = Timer(self.debounce_seconds, self._process_change)
            self.timer.daemon = True
            self.timer.start()

    def _process_change(self) -> None:
        with self.lock:
            if not self.pending:
                return
            self.pending = False
            self.timer = None

        try:
            self.on_change(self.playlist_path)
        except Exception as e:
            logger.error(f"[watch] Error processing change: {e}", exc_info=True)

    def flush(self) -> None:
        """Immediately process a pending change without waiting for debounce."""
        with self.lock:
            if self.timer:
                self.timer.cancel()
                self.timer = None
        self._process_change()


class PlaylistWatcher:
    """Watch one playlist file; use as a context manager or via start()/stop()."""

    def __init__(
        self,
        playlist_path: Path,
        on_change_callback: Callable[[Path], None],
        debounce_seconds: float = 1.0
    ):
        self.playlist_path = playlist_path
        self.on_change = on_change_callback
        self.debounce_seconds = debounce_seconds
        self.observer: Observer | None = None
        self.handler: DebouncedPlaylistHandler | None = None
        self._running = False

    def start(self) -> None:
        if self._running:
            logger.warning("Watcher already running")
            return

        directory = self.playlist_path.resolve().parent
        if not directory.exists():
            raise FileNotFoundError(f"Directory does not exist: {directory}")

        self.handler = DebouncedPlaylistHandler(self.playlist_path, self.on_change, self.debounce_seconds)
        self.observer = Observer()
        self.observer.schedule(self.handler, str(directory), recursive=False)
        self.observer.start()
        self._running = True
        logger.info(f"Watching: {self.playlist_path} (debounce={self.debounce_seconds}s)")

    def stop(self) -> None:
        if not self._running:
            return

        if self.handler:
            self.handler.flush()

        if self.observer:
            self.observer.stop()
            self.observer.join(timeout=5.0)

        self._running = False
        logger.info("Watch mode stopped")

    def is_running(self) -> bool:
        return self._running

    def __enter__(self) -> PlaylistWatcher:
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()


__all__ = ["PlaylistWatcher", "DebouncedPlaylistHandler"]
