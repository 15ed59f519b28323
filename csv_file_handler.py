import csv
import os

import pandas as pd

from data_table import DEFAULT_SAMPLE_LIMIT, DataTable


class CsvFileHandler:
    """Reads and writes one table file."""

    def __init__(self, path: str):
        self.path = path
        self.name, _ = os.path.splitext(os.path.basename(path))

    def read_records(self) -> list[list[str]]:
        """Ragged rows, right-padded with empty strings to the widest row.

        Blank lines carry no fields and are skipped.
        """
        with open(self.path, "r", encoding="utf-8-sig", newline="") as f:
            rows = [list(r) for r in csv.reader(f) if r]
        width = max((len(r) for r in rows), default=0)
        return [r + [""] * (width - len(r)) for r in rows]

    def load(self, sample_limit: int | None = DEFAULT_SAMPLE_LIMIT) -> DataTable:
        return DataTable.from_records(
            self.read_records(), name=self.name, sample_limit=sample_limit
        )

    def save(self, table: DataTable) -> None:
        df = table.rows.copy()
        df.columns = pd.Index(table.header(), dtype=object)
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            if table.column_count:
                df.to_csv(f, index=False, lineterminator="\n")
