"""Locations of database, table header and table data files under the install path."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

DEFAULT_DB_FOLDER_NAME = "base_db"
DB_FILE_SUFFIX = ".tvdb"
DEFAULT_TABLE_FOLDER = "tables"
DEFAULT_TABLE_NAME = "default_table"
TABLE_FILE_SUFFIX = ".tvdbb"
DEFAULT_TABLE_DATA_FOLDER = "data"
TABLE_DATA_FILE_SUFFIX = ".data"


@dataclass(frozen=True)
class InstallPaths:
    """Computes file locations from the installation folder."""

    install_path: str

    @classmethod
    def from_cache_file(cls, cache_file: Union[str, Path]) -> "InstallPaths":
        """Read the install path from the first line of *cache_file*, creating it if absent."""
        path = Path(cache_file)
        path.touch(exist_ok=True)
        with path.open("r", encoding="utf-8") as handle:
            first_line = handle.readline()
        return cls(first_line.rstrip("\r\n"))

    def base_db_folder(self) -> str:
        return self.db_folder(DEFAULT_DB_FOLDER_NAME)

    def db_folder(self, db_name: str) -> str:
        return f"{self.install_path}/{db_name}"

    def default_db_file(self, db_name: str) -> str:
        return f"{self.db_folder(db_name)}/{db_name}{DB_FILE_SUFFIX}"

    def default_table_path(self, db_name: str) -> str:
        return f"{self.db_folder(db_name)}/{DEFAULT_TABLE_FOLDER}"

    def table_header_file(self, db_name: str) -> str:
        return f"{self.default_table_path(db_name)}/{DEFAULT_TABLE_NAME}{TABLE_FILE_SUFFIX}"

    def table_data_folder(self, db_name: str) -> str:
        return f"{self.default_table_path(db_name)}/{DEFAULT_TABLE_DATA_FOLDER}"

    def table_data_file(self, db_name: str, table_name: str) -> str:
        return f"{self.table_data_folder(db_name)}/{table_name}{TABLE_DATA_FILE_SUFFIX}"