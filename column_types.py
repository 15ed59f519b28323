import re
from enum import IntEnum

import numpy as np
import pandas as pd


class ColumnType(IntEnum):
    """Display type of a column. Ordering is the widening lattice."""

    UNKNOWN = 0
    BOOLEAN = 1
    INT64 = 2
    FLOAT64 = 3
    UTF8 = 4

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    ColumnType.UNKNOWN: "Unknown",
    ColumnType.BOOLEAN: "Boolean",
    ColumnType.INT64: "Int",
    ColumnType.FLOAT64: "Float",
    ColumnType.UTF8: "String",
}

_BOOLEAN_RE = re.compile(r"^\s*(true|false)\s*$", re.IGNORECASE)
_FLOAT_RE = re.compile(
    r"^\s*("
    r"[-+]?\d*\.\d+([eE][-+]?\d+)?"
    r"|[-+]?\d+[eE][-+]?\d+"
    r"|[-+]?inf"
    r"|[-+]?nan"
    r")\s*$",
    re.IGNORECASE,
)
_INTEGER_RE = re.compile(r"^\s*[-+]?\d+\s*$")


def classify(cell: str) -> ColumnType:
    # first match wins
    if cell == "":
        return ColumnType.UNKNOWN
    if _BOOLEAN_RE.match(cell):
        return ColumnType.BOOLEAN
    if _FLOAT_RE.match(cell):
        return ColumnType.FLOAT64
    if _INTEGER_RE.match(cell):
        return ColumnType.INT64
    return ColumnType.UTF8


def widen(current: ColumnType, observed: ColumnType) -> ColumnType:
    return current if current >= observed else observed


def infer_column_types(frame: pd.DataFrame, sample_limit: int | None = 100) -> list[ColumnType]:
    """Fold per-cell classifications of the first sampled rows into one
    type per column. Columns without any non-empty sampled cell stay
    UNKNOWN."""
    n_cols = frame.shape[1]
    if n_cols == 0:
        return []
    limit = len(frame) if sample_limit is None else max(0, min(sample_limit, len(frame)))
    if limit == 0:
        return [ColumnType.UNKNOWN] * n_cols

    sample = frame.iloc[:limit]
    ranks = np.empty((limit, n_cols), dtype=np.int8)
    for c in range(n_cols):
        ranks[:, c] = [int(classify(v)) for v in sample.iloc[:, c]]

    folded = np.maximum.reduce(ranks, axis=0)
    return [ColumnType(int(r)) for r in folded]
