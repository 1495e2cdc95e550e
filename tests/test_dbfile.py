import pytest

from tinyvsql.dbfile import (
    DbHeader,
    read_db_file,
    read_install_path,
    write_db_file,
    write_install_path,
)


def test_db_file_round_trip(tmp_path):
    header = DbHeader(
        "base_db",
        "The base db of this dbms, has a table, which stores all db about this dbms",
        "/install/base_db/tables/default_table.tvdbb",
    )
    path = tmp_path / "base_db.tvdb"
    write_db_file(header, path)
    assert read_db_file(path) == header


def test_db_file_layout_is_one_field_per_line(tmp_path):
    path = tmp_path / "db.tvdb"
    write_db_file(DbHeader("db", "desc", "hdr"), path)
    assert path.read_bytes() == b"db\ndesc\nhdr\n"


def test_write_db_file_replaces_content(tmp_path):
    path = tmp_path / "db.tvdb"
    write_db_file(DbHeader("first", "one", "a"), path)
    write_db_file(DbHeader("second", "two", "b"), path)
    assert read_db_file(path) == DbHeader("second", "two", "b")


def test_read_missing_db_file_creates_empty_header(tmp_path):
    path = tmp_path / "missing.tvdb"
    header = read_db_file(path)
    assert header == DbHeader("", "", "")
    assert path.exists()


def test_read_partial_db_file_pads_missing_fields(tmp_path):
    path = tmp_path / "partial.tvdb"
    path.write_bytes(b"only_name\n")
    assert read_db_file(path) == DbHeader("only_name", "", "")


def test_install_path_round_trip(tmp_path):
    cache = tmp_path / "install.cache"
    write_install_path(cache, "/opt/tvdb")
    assert read_install_path(cache) == "/opt/tvdb"


def test_install_path_written_without_line_feed(tmp_path):
    cache = tmp_path / "install.cache"
    write_install_path(cache, "/opt/tvdb")
    assert cache.read_bytes() == b"/opt/tvdb"


def test_install_path_reads_only_first_line(tmp_path):
    cache = tmp_path / "install.cache"
    cache.write_bytes(b"/first\n/second\n")
    assert read_install_path(cache) == "/first"


def test_missing_install_cache_means_not_installed(tmp_path):
    cache = tmp_path / "install.cache"
    assert read_install_path(cache) == ""
    assert cache.exists()


def test_install_cache_that_is_a_folder_fails(tmp_path):
    with pytest.raises(OSError):
        read_install_path(tmp_path)