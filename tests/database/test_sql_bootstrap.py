from pathlib import Path

from src.gym_admin.gym_admin.database.bootstrap import _strip_create_db_and_use, iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_splitter_respects_quotes():
    sql = "INSERT INTO t VALUES('a;b'); INSERT INTO t VALUES(\"c;d\");\nSELECT 1"
    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES('a;b')",
        'INSERT INTO t VALUES("c;d")',
        "SELECT 1",
    ]


def test_schema_file_has_every_table_and_no_status_column():
    statements = list(iter_sql_statements(_strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))))

    assert not any(s.upper().startswith(("CREATE DATABASE", "USE ")) for s in statements)
    for table in ("users", "members", "checkins", "anomalies", "payments", "staff_roles", "staff", "staff_attendance"):
        assert any(f"CREATE TABLE IF NOT EXISTS {table} (" in s for s in statements), table

    members_ddl = next(s for s in statements if "CREATE TABLE IF NOT EXISTS members (" in s)
    assert " status " not in members_ddl.split("(", 1)[1]
