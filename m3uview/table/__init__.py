"""Tabular view of playlist entries: flattening and formatting."""

from .normalizer import (
    FlatRecord,
    KeyCollisionError,
    flatten,
    flatten_all,
    infer_columns,
    to_rows,
    denormalize,
)

__all__ = [
    "FlatRecord",
    "KeyCollisionError",
    "flatten",
    "flatten_all",
    "infer_columns",
    "to_rows",
    "denormalize",
]
