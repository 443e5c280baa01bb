from pathlib import Path

from src.time_clock.time_clock.database.bootstrap import SCHEMA_PATH, _strip_create_db_and_use, iter_sql_statements


def test_statements_split_outside_quotes():
    sql = "CREATE TABLE a (x INT); INSERT INTO a VALUES ('x;y');\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('x;y')",
        "SELECT 1",
    ]


def test_database_name_statements_are_dropped():
    sql = "CREATE DATABASE IF NOT EXISTS time_clock;\nUSE time_clock;\nCREATE TABLE t (id INT);"

    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]


def test_schema_ships_inside_the_package():
    from src.time_clock.time_clock.database import bootstrap

    assert SCHEMA_PATH.is_file()
    assert SCHEMA_PATH.parent == Path(bootstrap.__file__).resolve().parent
    assert "CREATE TABLE IF NOT EXISTS employees" in SCHEMA_PATH.read_text(encoding="utf-8")
