"""Tests for the debounced playlist watcher (no real filesystem events)."""

from pathlib import Path
from types import SimpleNamespace

from m3uview.services.watch_service import DebouncedPlaylistHandler, PlaylistWatcher


def _event(path: Path, event_type: str = 'modified', is_directory: bool = False):
    return SimpleNamespace(src_path=str(path), dest_path='', event_type=event_type, is_directory=is_directory)


def test_handler_ignores_other_files(tmp_path: Path):
    calls = []
    target = tmp_path / 'list.m3u'
    handler = DebouncedPlaylistHandler(target, calls.append, debounce_seconds=60)
    handler.on_any_event(_event(tmp_path / 'other.m3u'))
    handler.on_any_event(_event(tmp_path, is_directory=True))
    assert handler.timer is None
    handler.flush()
    assert calls == []


def test_handler_debounces_to_single_callback(tmp_path: Path):
    calls = []
    target = tmp_path / 'list.m3u'
    handler = DebouncedPlaylistHandler(target, calls.append, debounce_seconds=60)
    for _ in range(3):
        handler.on_any_event(_event(target))
    handler.flush()
    assert calls == [target.resolve()]


def test_handler_matches_move_destination(tmp_path: Path):
    calls = []
    target = tmp_path / 'list.m3u'
    handler = DebouncedPlaylistHandler(target, calls.append, debounce_seconds=60)
    event = SimpleNamespace(src_path=str(tmp_path / 'list.m3u.tmp'), dest_path=str(target),
                            event_type='moved', is_directory=False)
    handler.on_any_event(event)
    handler.flush()
    assert calls == [target.resolve()]


def test_callback_errors_are_contained(tmp_path: Path):
    target = tmp_path / 'list.m3u'

    def boom(path):
        raise RuntimeError("boom")

    handler = DebouncedPlaylistHandler(target, boom, debounce_seconds=60)
    handler.on_any_event(_event(target))
    handler.flush()


def test_watcher_start_stop(tmp_path: Path):
    target = tmp_path / 'list.m3u'
    target.write_text('#EXTM3U\n', encoding='utf-8')
    watcher = PlaylistWatcher(target, lambda p: None, debounce_seconds=0.1)
    with watcher:
        assert watcher.is_running()
    assert not watcher.is_running()
