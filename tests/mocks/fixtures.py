"""Sample playlist documents and file fixtures."""
import pytest
from pathlib import Path

SAMPLE_M3U = (
    "#EXTM3U\n"
    "#EXTALB:Greatest Hits\n"
    "#EXTINF:123,Artist One - First Song\n"
    "music/first.mp3\n"
    "\n"
    "# plain comment\n"
    "#EXTINF:-1,Radio Stream\n"
    "http://radio.example.com/live\n"
    "#EXTART:Someone\n"
    "#EXTINF:305,Artist Two - Second Song\n"
    "  music/second.flac  \n"
)


@pytest.fixture
def sample_m3u_text() -> str:
    return SAMPLE_M3U


@pytest.fixture
def sample_playlist_file(tmp_path: Path) -> Path:
    path = tmp_path / 'sample.m3u8'
    path.write_text(SAMPLE_M3U, encoding='utf-8')
    return path


@pytest.fixture
def broken_playlist_file(tmp_path: Path) -> Path:
    path = tmp_path / 'broken.m3u'
    path.write_text("#EXTM3U\n#EXTINF:5,Last\n", encoding='utf-8')
    return path
