from pathlib import Path

from src.employee_scheduling.employee_scheduling.database.bootstrap import iter_sql_statements

REPO_ROOT = Path(__file__).resolve().parents[2]


def test_splits_on_semicolons_outside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT \"x;y\";\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'SELECT "x;y"',
        "SELECT 1",
    ]


def test_schema_defines_the_three_tables():
    schema = (REPO_ROOT / "database" / "schema.sql").read_text(encoding="utf-8")
    statements = [s for s in iter_sql_statements(schema) if s.lstrip().upper().startswith("CREATE TABLE")]

    assert len(statements) == 3
    assert "PRIMARY KEY (employee_id, shift_id)" in statements[2]
