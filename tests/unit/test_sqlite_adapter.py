import sqlite3

import pytest

from adapters.base import AdapterConnectionError, NotInitializedError, QueryError
from adapters.sqlite import SQLiteAdapter


def _open(path):
    adapter = SQLiteAdapter(str(path))
    adapter.open()
    return adapter


def test_open_creates_file_and_insights_table(tmp_path):
    db_path = tmp_path / "nested" / "fresh.db"
    adapter = _open(db_path)
    adapter.close()

    assert db_path.exists()
    conn = sqlite3.connect(str(db_path))
    try:
        names = [r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")]
    finally:
        conn.close()
    assert "mcp_insights" in names


def test_query_preserves_column_order_and_types(tmp_path):
    adapter = _open(tmp_path / "types.db")
    try:
        adapter.execute("CREATE TABLE t (z TEXT, a INTEGER, m REAL, b BLOB, n TEXT)")
        adapter.execute(
            "INSERT INTO t VALUES (:z, :a, :m, :b, :n)",
            {"z": "hello", "a": 7, "m": 2.5, "b": b"\x00\xff", "n": None},
        )
        rows = adapter.query("SELECT * FROM t")
    finally:
        adapter.close()

    assert rows == [{"z": "hello", "a": 7, "m": 2.5, "b": b"\x00\xff", "n": None}]
    assert list(rows[0].keys()) == ["z", "a", "m", "b", "n"]


def test_query_binds_named_parameters(tmp_path):
    adapter = _open(tmp_path / "params.db")
    try:
        adapter.execute("CREATE TABLE people (name TEXT)")
        adapter.execute("INSERT INTO people VALUES ('ann'), ('bob')")
        rows = adapter.query("SELECT name FROM people WHERE name = :name", {"name": "bob' OR '1'='1"})
        assert rows == []
        rows = adapter.query("SELECT name FROM people WHERE name = :name", {"name": "bob"})
        assert rows == [{"name": "bob"}]
    finally:
        adapter.close()


def test_execute_returns_affected_rows_and_zero_for_ddl(tmp_path):
    adapter = _open(tmp_path / "count.db")
    try:
        assert adapter.execute("CREATE TABLE t (v INTEGER)") == 0
        assert adapter.execute("INSERT INTO t VALUES (1), (2), (3)") == 3
        assert adapter.execute("UPDATE t SET v = v + 1 WHERE v > 1") == 2
        assert adapter.execute("DELETE FROM t") == 3
    finally:
        adapter.close()


def test_writes_are_visible_to_a_new_connection(tmp_path):
    db_path = tmp_path / "autocommit.db"
    adapter = _open(db_path)
    try:
        adapter.execute("CREATE TABLE t (v INTEGER)")
        adapter.execute("INSERT INTO t VALUES (42)")
        conn = sqlite3.connect(str(db_path))
        try:
            assert conn.execute("SELECT v FROM t").fetchall() == [(42,)]
        finally:
            conn.close()
    finally:
        adapter.close()


def test_query_error_carries_engine_message(tmp_path):
    adapter = _open(tmp_path / "err.db")
    try:
        with pytest.raises(QueryError, match="no such table: missing"):
            adapter.query("SELECT * FROM missing")
    finally:
        adapter.close()


def test_operations_before_open_or_after_close_fail(tmp_path):
    adapter = SQLiteAdapter(str(tmp_path / "closed.db"))
    with pytest.raises(NotInitializedError):
        adapter.query("SELECT 1")

    adapter.open()
    adapter.close()
    adapter.close()
    with pytest.raises(NotInitializedError):
        adapter.execute("DELETE FROM mcp_insights")


def test_open_fails_for_unusable_path(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    adapter = SQLiteAdapter(str(blocker / "db.sqlite"))
    with pytest.raises(AdapterConnectionError):
        adapter.open()


def test_metadata():
    adapter = SQLiteAdapter("some/file.db")
    assert adapter.engine == "sqlite"
    assert adapter.connection_info == "some/file.db"


def test_open_expands_home_for_directory_and_file(monkeypatch, tmp_path):
    home = tmp_path / "home"
    workdir = tmp_path / "cwd"
    home.mkdir()
    workdir.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(workdir)

    adapter = SQLiteAdapter("~/sub/x.db")
    adapter.open()
    adapter.close()

    assert (home / "sub" / "x.db").exists()
    assert not (workdir / "~").exists()
    assert adapter.connection_info == "~/sub/x.db"


def test_missing_descriptor_is_a_connection_error():
    with pytest.raises(AdapterConnectionError, match="connection_info is required"):
        SQLiteAdapter(None)
