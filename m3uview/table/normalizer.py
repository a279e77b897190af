"""Flatten nested records into single-level rows for tabular display.

Every value is classified into one of three kinds before it is visited:

- MAPPING: ``collections.abc.Mapping`` instances and dataclass instances
- SEQUENCE: lists and tuples (strings and bytes are scalars)
- SCALAR: everything else

Mappings and sequences are descended into; each scalar becomes one key in
the flat record, named by the dot-joined path from the root (sequence
indices are path segments). Empty containers contribute no keys.

Example:
    >>> flatten({"title": "T", "meta": {"album": "A", "year": 2000}})
    {'title': 'T', 'meta.album': 'A', 'meta.year': 2000}

Inputs must be acyclic; there is no depth limit.
"""
from __future__ import annotations
import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Sequence, Tuple

FlatRecord = Dict[str, Any]

OVERWRITE = "overwrite"
ERROR = "error"
COLLISION_MODES = (OVERWRITE, ERROR)


class ValueKind(Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class KeyCollisionError(ValueError):
    """Two different paths flattened to the same key (strict mode only)."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"flattened key {key!r} produced by more than one path")


def classify(value: Any) -> ValueKind:
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def iter_fields(value: Any) -> Iterator[Tuple[str, Any]]:
    """Yield ``(path_segment, child)`` pairs of a mapping or sequence value."""
    kind = classify(value)
    if kind is ValueKind.SEQUENCE:
        for index, child in enumerate(value):
            yield str(index), child
    elif isinstance(value, Mapping):
        for key, child in value.items():
            yield str(key), child
    elif kind is ValueKind.MAPPING:
        for field in dataclasses.fields(value):
            yield field.name, getattr(value, field.name)


def _walk(value: Any, prefix: str, out: FlatRecord, on_collision: str) -> None:
    for segment, child in iter_fields(value):
        path = f"{prefix}.{segment}" if prefix else segment
        if classify(child) is ValueKind.SCALAR:
            if on_collision == ERROR and path in out:
                raise KeyCollisionError(path)
            out[path] = child
        else:
            _walk(child, path, out, on_collision)


def flatten(record: Any, on_collision: str = OVERWRITE) -> FlatRecord:
    """Flatten one record into ``{dotted.path: scalar}``.

    Args:
        record: Mapping, dataclass instance or list/tuple, arbitrarily nested.
            A scalar has no fields and flattens to an empty record.
        on_collision: ``"overwrite"`` (later path wins) or ``"error"``
            (raise :class:`KeyCollisionError`).

    Returns:
        New dict; the input is not modified.
    """
    if on_collision not in COLLISION_MODES:
        raise ValueError(f"Unknown collision mode '{on_collision}'. Available: {', '.join(COLLISION_MODES)}")
    out: FlatRecord = {}
    _walk(record, "", out, on_collision)
    return out


def flatten_all(records: Iterable[Any], on_collision: str = OVERWRITE) -> List[FlatRecord]:
    """Flatten each record, preserving input order."""
    return [flatten(r, on_collision) for r in records]


def infer_columns(records: Sequence[Any]) -> List[str]:
    """Column names for a table of records.

    Only the first record is consulted; keys that appear solely in later
    records get no column. Already flattened records are accepted as-is.
    """
    if not records:
        return []
    return list(flatten(records[0]))


def to_rows(flat_records: Iterable[FlatRecord], columns: Sequence[str]) -> List[List[Any]]:
    """Resolve each flat record against ``columns``; missing keys become None."""
    return [[rec.get(col) for col in columns] for rec in flat_records]


def denormalize(flat_record: FlatRecord) -> Any:
    """Rebuilding nested records from flat ones is not supported."""
    raise NotImplementedError("denormalize: reconstructing nested records from flat keys is not supported")


__all__ = [
    "FlatRecord",
    "ValueKind",
    "KeyCollisionError",
    "classify",
    "iter_fields",
    "flatten",
    "flatten_all",
    "infer_columns",
    "to_rows",
    "denormalize",
    "OVERWRITE",
    "ERROR",
]
