from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

import pandas as pd

from column_types import ColumnType, infer_column_types

DEFAULT_SAMPLE_LIMIT = 100


@dataclass
class Column:
    name: str
    inferred_type: ColumnType = ColumnType.UNKNOWN


@dataclass
class TableSchema:
    name: str = ""
    columns: List[Column] = field(default_factory=list)

    def names(self) -> list[str]:
        return [c.name for c in self.columns]


def _string_frame(rows, width: int) -> pd.DataFrame:
    cells = [[str(v) for v in r][:width] + [""] * max(0, width - len(r)) for r in rows]
    return pd.DataFrame(cells, columns=range(width), dtype=object)


class DataTable:
    """One table: schema, string cells and the row cursor/selection.

    Cells live in a DataFrame with positional integer column labels so
    duplicate or empty header names never collide; names and inferred
    types are kept in ``schema``.
    """

    def __init__(self, schema: TableSchema, rows: Optional[pd.DataFrame] = None):
        self.schema = schema
        if rows is None:
            rows = _string_frame([], len(schema.columns))
        self.rows = rows.reset_index(drop=True)
        self.cursor: Optional[int] = None
        self.selected_rows: set[int] = set()

    @classmethod
    def from_records(
        cls,
        records: Iterable[list[str]],
        name: str = "",
        sample_limit: Optional[int] = DEFAULT_SAMPLE_LIMIT,
    ) -> "DataTable":
        """Build a table from already padded records; the first one is the header."""
        it = iter(records)
        header = next(it, None)
        if header is None:
            return cls(TableSchema(name=name))
        schema = TableSchema(name=name, columns=[Column(str(h)) for h in header])
        table = cls(schema, _string_frame(it, len(header)))
        table.infer_schema(sample_limit)
        return table

    # ---------- shape ----------
    @property
    def name(self) -> str:
        return self.schema.name

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.schema.columns)

    def header(self) -> list[str]:
        return self.schema.names()

    def row(self, index: int) -> list[str]:
        return [str(v) for v in self.rows.iloc[index].tolist()]

    def records(self) -> Iterator[list[str]]:
        for values in self.rows.itertuples(index=False, name=None):
            yield [str(v) for v in values]

    def cell(self, row: int, col: int) -> str:
        return str(self.rows.iat[row, col])

    # ---------- schema ----------
    def infer_schema(self, sample_limit: Optional[int] = DEFAULT_SAMPLE_LIMIT):
        types = infer_column_types(self.rows, sample_limit)
        for column, inferred in zip(self.schema.columns, types):
            column.inferred_type = inferred

    def add_column(self, name: str = ""):
        position = self.column_count
        self.schema.columns.append(Column(name, ColumnType.UTF8))
        self.rows[position] = ""

    # ---------- navigation ----------
    def next(self):
        if self.row_count == 0:
            self.add_row()
            self.cursor = 0
            return
        if self.cursor is None:
            self.cursor = 0
        else:
            self.cursor = (self.cursor + 1) % self.row_count

    def previous(self):
        if self.row_count == 0:
            return
        if self.cursor is None:
            self.cursor = 0
        else:
            self.cursor = (self.cursor - 1) % self.row_count

    # ---------- selection ----------
    def select_current(self):
        if self.cursor is not None:
            self.selected_rows.add(self.cursor)

    def deselect_current(self):
        if self.cursor is not None:
            self.selected_rows.discard(self.cursor)

    def sorted_selection(self) -> list[int]:
        return sorted(self.selected_rows)

    # ---------- row mutation ----------
    def _blank_rows(self, count: int) -> pd.DataFrame:
        return _string_frame([[""] * self.column_count for _ in range(count)], self.column_count)

    def add_row(self):
        if self.row_count == 0:
            self.rows = self._blank_rows(1)
            return
        self.rows = pd.concat([self.rows, self._blank_rows(1)], ignore_index=True)

    def duplicate_selected(self) -> int:
        """Insert a copy of every selected row right below the cursor.

        Every copy targets ``cursor + 1``, so the rows end up in reverse
        selection order beneath the cursor. Cursor and selection are left
        as they were.
        """
        if self.cursor is None or not self.selected_rows:
            return 0
        copies = [self.rows.iloc[[idx]] for idx in self.sorted_selection()]
        insert_at = self.cursor + 1
        for copy in copies:
            self.rows = pd.concat(
                [self.rows.iloc[:insert_at], copy, self.rows.iloc[insert_at:]],
                ignore_index=True,
            )
        return len(copies)

    def delete_selected(self) -> int:
        if not self.selected_rows:
            return 0
        doomed = sorted(self.selected_rows, reverse=True)
        for idx in doomed:
            self.rows = self.rows.drop(index=idx)
        self.rows = self.rows.reset_index(drop=True)
        self.selected_rows = set()
        self.cursor = None
        return len(doomed)

    def set_row(self, index: int, values: list[str]) -> bool:
        if index < 0 or index >= self.row_count:
            return False
        width = self.column_count
        padded = [str(v) for v in values[:width]] + [""] * max(0, width - len(values))
        if width:
            self.rows.iloc[index, :] = padded
        return True
