"""Database header files and the cached installation path."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


@dataclass
class DbHeader:
    """Header of a database: its name, description and table header file."""

    db_name: str = ""
    db_description: str = ""
    default_table_header_file_path: str = ""


def _ensure_file(path: PathLike) -> Path:
    file_path = Path(path)
    file_path.touch(exist_ok=True)
    return file_path


def _read_lines(path: PathLike, count: int) -> list[str]:
    """Read up to *count* lines without their line feeds, padding with empty strings."""
    file_path = _ensure_file(path)
    lines: list[str] = []
    with file_path.open("r", encoding="utf-8", newline="") as handle:
        for _ in range(count):
            line = handle.readline()
            if not line:
                break
            lines.append(line[:-1] if line.endswith("\n") else line)
    lines.extend([""] * (count - len(lines)))
    return lines


def write_db_file(header: DbHeader, path: PathLike) -> None:
    """Store *header* at *path*, one field per line, replacing any previous content."""
    text = "".join(
        f"{field}\n"
        for field in (
            header.db_name,
            header.db_description,
            header.default_table_header_file_path,
        )
    )
    with Path(path).open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def read_db_file(path: PathLike) -> DbHeader:
    """Load a header stored by :func:`write_db_file`; the file is created if absent."""
    name, description, table_header = _read_lines(path, 3)
    return DbHeader(name, description, table_header)


def read_install_path(cache_file: PathLike) -> str:
    """First line of *cache_file*, creating the file if absent; empty means not installed."""
    (install_path,) = _read_lines(cache_file, 1)
    return install_path


def write_install_path(cache_file: PathLike, install_path: str) -> None:
    """Replace the content of *cache_file* with *install_path*."""
    with Path(cache_file).open("w", encoding="utf-8", newline="") as handle:
        handle.write(install_path)