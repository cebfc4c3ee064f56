from __future__ import annotations

from pathlib import Path

from src.rollbook.rollbook.database.bootstrap import iter_sql_statements

REPO_ROOT = Path(__file__).resolve().parents[2]


def test_splitter_skips_comments_and_keeps_quoted_semicolons():
    sql = """
    -- groups
    INSERT INTO student_groups (group_id, group_name) VALUES ('g1', 'Grade 1; A');
    INSERT INTO members (member_id, full_name) VALUES ('m1', 'O''Neil'); -- trailing
    SELECT 1
    """

    stmts = list(iter_sql_statements(sql))

    assert len(stmts) == 3
    assert stmts[0].startswith("INSERT INTO student_groups")
    assert "'Grade 1; A'" in stmts[0]
    assert stmts[2] == "SELECT 1"


def test_schema_file_creates_all_tables():
    sql = (REPO_ROOT / "database" / "schema.sql").read_text(encoding="utf-8")

    creates = [s for s in iter_sql_statements(sql) if s.upper().startswith("CREATE TABLE")]

    assert len(creates) == 4
    assert any("uq_attendance_entry" in s for s in creates)
