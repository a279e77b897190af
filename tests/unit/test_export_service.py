import csv
import json
from pathlib import Path

import pytest

from m3uview.services.export_service import default_export_path, export_table
from m3uview.services.playlist_service import build_table


@pytest.fixture
def table():
    return build_table([
        {'title': 'A', 'meta': {'year': 2000}},
        {'title': 'B'},
    ])


def test_export_csv(tmp_path: Path, table):
    out = tmp_path / 'nested' / 'out.csv'
    result = export_table(table, out, 'csv')
    assert result.row_count == 2
    assert result.columns == ['title', 'meta.year']
    with out.open(newline='', encoding='utf-8') as fh:
        rows = list(csv.reader(fh))
    assert rows == [['title', 'meta.year'], ['A', '2000'], ['B', '']]


def test_export_json(tmp_path: Path, table):
    out = tmp_path / 'out.json'
    export_table(table, out, 'JSON')
    data = json.loads(out.read_text(encoding='utf-8'))
    assert data == [{'title': 'A', 'meta.year': 2000}, {'title': 'B', 'meta.year': None}]


def test_export_unknown_format(tmp_path: Path, table):
    with pytest.raises(ValueError):
        export_table(table, tmp_path / 'out.xml', 'xml')


def test_default_export_path():
    assert default_export_path(Path('exp'), Path('music/party.m3u8'), 'csv') == Path('exp/party.csv')
