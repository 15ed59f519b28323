import os
from datetime import datetime
from typing import Callable, Optional

from csv_file_handler import CsvFileHandler
from data_table import DEFAULT_SAMPLE_LIMIT, DataTable
from dir_utils import copy_tree_merge, list_files

ARCHIVE_STAMP_FORMAT = "%Y-%m-%d-%H%M%S"


class TableStore:
    """All tables of the master directory, plus the archive/flush save."""

    def __init__(
        self,
        master_directory: str,
        archive_directory: str,
        tables: Optional[dict[str, DataTable]] = None,
        extension: str = "csv",
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.master_directory = master_directory
        self.archive_directory = archive_directory
        self.extension = extension.lstrip(".")
        self.tables: dict[str, DataTable] = dict(tables or {})
        self._clock = clock

    @classmethod
    def load(
        cls,
        master_directory: str,
        archive_directory: str,
        extension: str = "csv",
        sample_limit: Optional[int] = DEFAULT_SAMPLE_LIMIT,
        clock: Callable[[], datetime] = datetime.now,
    ) -> "TableStore":
        os.makedirs(master_directory, exist_ok=True)
        tables = {}
        for path in list_files(master_directory, extension):
            handler = CsvFileHandler(path)
            tables[handler.name] = handler.load(sample_limit)
        return cls(
            master_directory,
            archive_directory,
            tables=tables,
            extension=extension,
            clock=clock,
        )

    # ---------- lookup ----------
    def table_names(self) -> list[str]:
        return list(self.tables.keys())

    def get_table(self, name: str) -> DataTable:
        return self.tables[name]

    def __contains__(self, name) -> bool:
        return name in self.tables

    def __len__(self) -> int:
        return len(self.tables)

    # ---------- persistence ----------
    def _new_archive_dir(self) -> str:
        stamp = self._clock().strftime(ARCHIVE_STAMP_FORMAT)
        os.makedirs(self.archive_directory, exist_ok=True)
        candidate = os.path.join(self.archive_directory, stamp)
        suffix = 0
        while True:
            try:
                os.makedirs(candidate)
                return candidate
            except FileExistsError:
                suffix += 1
                candidate = os.path.join(self.archive_directory, f"{stamp}-{suffix}")

    def archive(self) -> str:
        """Write every table into a fresh timestamped directory."""
        target = self._new_archive_dir()
        for name, table in self.tables.items():
            path = os.path.join(target, f"{name}.{self.extension}")
            CsvFileHandler(path).save(table)
        return target

    def flush(self, archive_dir: str) -> None:
        copy_tree_merge(archive_dir, self.master_directory)

    def save(self) -> str:
        # an archive failure raises before anything touches the master directory
        archive_dir = self.archive()
        self.flush(archive_dir)
        return archive_dir
