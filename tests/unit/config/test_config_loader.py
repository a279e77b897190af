from pathlib import Path
import logging
import textwrap

from m3uview.config import load_config, load_typed_config, deep_merge, coerce_scalar
from m3uview.config_types import AppConfig, TableConfig


def test_deep_merge_simple():
    a = {'a': 1, 'b': {'x': 1, 'y': 2}}
    b = {'b': {'y': 99, 'z': 5}, 'c': 3}
    merged = deep_merge(a, b)
    assert merged == {'a': 1, 'b': {'x': 1, 'y': 99, 'z': 5}, 'c': 3}
    assert a['b']['y'] == 2


def test_coerce_scalar():
    assert coerce_scalar('true') is True
    assert coerce_scalar('False') is False
    assert coerce_scalar('10') == 10
    assert coerce_scalar('-3') == -3
    assert isinstance(coerce_scalar('10.5'), float)
    assert coerce_scalar('["title", "source"]') == ['title', 'source']
    assert coerce_scalar('foo') == 'foo'


def test_defaults():
    cfg = load_config()
    assert cfg['parser']['strict'] is False
    assert cfg['normalizer']['on_collision'] == 'overwrite'
    assert cfg['table']['columns'] == []


def test_load_config_dotenv_and_env(tmp_path: Path, monkeypatch):
    """.env file is loaded and environment variables override it."""
    env_file = tmp_path / '.env'
    env_file.write_text(textwrap.dedent('''\
    M3UVIEW__PARSER__STRICT=true
    M3UVIEW__TABLE__MAX_WIDTH=20  # narrow terminal
    M3UVIEW__EXPORT__FORMAT="json"
    '''), encoding='utf-8')
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('M3UVIEW_ENABLE_DOTENV', '1')
    monkeypatch.setenv('M3UVIEW__TABLE__MAX_WIDTH', '60')
    cfg = load_config()
    assert cfg['parser']['strict'] is True
    assert cfg['export']['format'] == 'json'
    assert cfg['table']['max_width'] == 60


def test_overrides_win(monkeypatch):
    monkeypatch.setenv('M3UVIEW__NORMALIZER__ON_COLLISION', 'error')
    cfg = load_config({'normalizer': {'on_collision': 'overwrite'}})
    assert cfg['normalizer']['on_collision'] == 'overwrite'


def test_typed_config_round_trip():
    typed = load_typed_config({'table': {'columns': ['title']}})
    assert isinstance(typed, AppConfig)
    assert typed.table.columns == ['title']
    assert AppConfig.from_dict(typed.to_dict()) == typed


def test_table_config_defaults():
    config = TableConfig()
    assert config.columns == []
    assert config.max_width == 40


def test_dotenv_quotes_comments_and_foreign_keys(tmp_path: Path, monkeypatch):
    (tmp_path / '.env').write_text(textwrap.dedent('''\
    # comment line
    OTHER_TOOL__KEY=ignored
    M3UVIEW__TABLE__EMPTY_CELL='-'  # dash for missing
    M3UVIEW__EXPORT__DIRECTORY=out#1
    M3UVIEW__TABLE__COLUMNS=["title", "source"]
    not a valid line
    '''), encoding='utf-8')
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('M3UVIEW_ENABLE_DOTENV', '1')
    cfg = load_config()
    assert cfg['table']['empty_cell'] == '-'
    assert cfg['export']['directory'] == 'out#1'
    assert cfg['table']['columns'] == ['title', 'source']
    assert 'other_tool' not in cfg


def test_unknown_log_level_falls_back_to_info():
    cfg = load_config({'log_level': 'chatty'})
    assert cfg['log_level'] == 'chatty'
    assert logging.getLogger().level == logging.INFO
