import sqlite3
from datetime import date, datetime
from typing import Any

from src.components.inspection_numbering import (
    DuplicateInspectionNumberError,
    IssuedInspectionNumber,
)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def _like_prefix(prefix: str) -> str:
    escaped = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"{escaped}%"


class SQLiteInspectionNumberRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        # Station codes are case sensitive: OQA and oqa are different prefixes
        conn.execute("PRAGMA case_sensitive_like = ON;")
        return conn

    def list_numbers_with_prefix(self, prefix: str) -> list[str]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                """
                SELECT inspection_no FROM inspection_numbers
                WHERE inspection_no LIKE ? ESCAPE '\\'
                ORDER BY inspection_no DESC
            """,
                (_like_prefix(prefix),),
            ).fetchall()
            return [row["inspection_no"] for row in rows]
        finally:
            conn.close()

    def save_number(self, issued: IssuedInspectionNumber) -> IssuedInspectionNumber:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO inspection_numbers (
                    inspection_no, station, prefix, running_number,
                    fiscal_year, work_week, issued_on, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    issued.inspection_no,
                    issued.station,
                    issued.prefix,
                    issued.running_number,
                    issued.fiscal_year,
                    issued.week,
                    issued.issued_on.isoformat(),
                    issued.created_at.isoformat(),
                ),
            )
            conn.commit()
            return issued
        except sqlite3.IntegrityError:
            raise DuplicateInspectionNumberError(issued.inspection_no) from None
        finally:
            conn.close()

    def get(self, inspection_no: str) -> IssuedInspectionNumber | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM inspection_numbers WHERE inspection_no = ?", (inspection_no,)
            ).fetchone()
        finally:
            conn.close()

        if not row:
            return None
        return IssuedInspectionNumber(
            inspection_no=row["inspection_no"],
            station=row["station"],
            prefix=row["prefix"],
            running_number=row["running_number"],
            fiscal_year=row["fiscal_year"],
            week=row["work_week"],
            issued_on=date.fromisoformat(row["issued_on"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )
