from __future__ import annotations
import os
import re
import json
import logging
from typing import Any, Dict
from pathlib import Path
import copy

logger = logging.getLogger(__name__)

_DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "parser": {
        "strict": False,  # Reject source lines without a preceding #EXTINF
        "encoding": "utf-8-sig",
    },
    "normalizer": {
        "on_collision": "overwrite",  # or "error"
    },
    "table": {
        "columns": [],  # Empty: infer from first entry
        "max_width": 40,
        "empty_cell": "",
    },
    "export": {
        "directory": "data/export",
        "format": "csv",
    },
    "watch": {
        "debounce_seconds": 1.0,
    },
}

ENV_PREFIX = "M3UVIEW__"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# KEY=VALUE, value optionally quoted, optional trailing " # comment"
_dotenv_line = re.compile(
    r"""^\s*(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*=\s*
        (?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>.*?))
        \s*(?:\s\#.*)?$""",
    re.VERBOSE,
)


def deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``base`` with ``overrides`` applied section by section.

    Nested dicts merge key by key; any other override value replaces the base
    value outright (lists included).
    """
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        current = merged.get(key)
        merged[key] = deep_merge(current, value) if isinstance(current, dict) and isinstance(value, dict) else value
    return merged


def _read_dotenv(path: Path) -> Dict[str, str]:
    """Read ``M3UVIEW__`` assignments from a .env file; other keys are ignored."""
    if not path.is_file():
        return {}
    values: Dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        match = _dotenv_line.match(line)
        if not match or not match.group('key').startswith(ENV_PREFIX):
            continue
        values[match.group('key')] = next(g for g in match.group('dq', 'sq', 'bare') if g is not None)
    return values


def _apply_env(cfg: Dict[str, Any], values: Dict[str, str]) -> None:
    """Set ``M3UVIEW__SECTION__KEY=value`` pairs into cfg in place."""
    for raw_key, value in values.items():
        *sections, name = raw_key[len(ENV_PREFIX):].lower().split("__")
        cursor = cfg
        for section in sections:
            cursor = cursor.setdefault(section, {})
        cursor[name] = coerce_scalar(value)


def load_config(overrides: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Load configuration merging defaults <- .env <- environment <- overrides.

    During test runs (detected via PYTEST_CURRENT_TEST) .env loading is skipped
    unless M3UVIEW_ENABLE_DOTENV=1 is set to allow deterministic defaults.

    Args:
        overrides: Dict of values to deep-merge last (CLI flags, tests).

    Returns:
        dict: Configuration dictionary (for typed access use load_typed_config()).
    """
    cfg: Dict[str, Any] = copy.deepcopy(_DEFAULTS)
    if os.environ.get('M3UVIEW_ENABLE_DOTENV') or not os.environ.get('PYTEST_CURRENT_TEST'):
        _apply_env(cfg, _read_dotenv(Path('.env')))
    # Real environment wins over .env
    _apply_env(cfg, {k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)})
    if overrides:
        cfg = deep_merge(cfg, overrides)

    _configure_logging(cfg.get('log_level', 'INFO'))

    return cfg


def load_typed_config(overrides: Dict[str, Any] | None = None):
    """Load configuration as typed AppConfig object.

    Args:
        overrides: Dictionary of override values

    Returns:
        AppConfig: Typed configuration object with .to_dict() for dict conversion
    """
    from .config_types import AppConfig
    return AppConfig.from_dict(load_config(overrides))


def _configure_logging(level_name: str) -> None:
    """Configure the root logger; unknown level names fall back to INFO."""
    name = str(level_name).upper()
    logging.basicConfig(
        level=getattr(logging, name) if name in LEVELS else logging.INFO,
        format='%(message)s',
        force=True,
    )
    logger.debug(f"Log level set to {name if name in LEVELS else 'INFO'}")


def coerce_scalar(value: str) -> Any:
    """Turn an environment string into a config value.

    JSON literals (numbers, true/false, lists, objects) are decoded; yes/no
    and any-case true/false are booleans; everything else stays a string.
    """
    txt = value.strip()
    lower = txt.lower()
    if lower in ("true", "yes"):
        return True
    if lower in ("false", "no"):
        return False
    try:
        return json.loads(txt)
    except ValueError:
        return txt


__all__ = ["load_config", "load_typed_config", "deep_merge", "coerce_scalar", "ENV_PREFIX"]
