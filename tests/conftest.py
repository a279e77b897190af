"""Pytest fixtures shared across the test suite."""
import pytest
from pathlib import Path
from typing import Dict, Any

from mocks.fixtures import *  # noqa: F401,F403


@pytest.fixture
def test_config(tmp_path: Path) -> Dict[str, Any]:
    """Provide a minimal test configuration as a dict.

    Tests pass this to the CLI via ``CliRunner.invoke(..., obj=cfg)`` rather
    than setting environment variables. Export paths are isolated to tmp_path.
    """
    return {
        'log_level': 'DEBUG',
        'parser': {
            'strict': False,
            'encoding': 'utf-8-sig',
        },
        'normalizer': {
            'on_collision': 'overwrite',
        },
        'table': {
            'columns': [],
            'max_width': 40,
            'empty_cell': '',
        },
        'export': {
            'directory': str(tmp_path / 'export'),
            'format': 'csv',
        },
        'watch': {
            'debounce_seconds': 0.1,
        },
    }
