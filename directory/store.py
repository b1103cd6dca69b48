"""
Advocate record source.

Two backends, both yielding the same list-of-dict records:

    data/advocates.json   — static seed list served by GET /api/advocates
    SQLite database       — optional persistent store, filled by POST /api/seed

The JSON seed is the source of truth for reads; the database path exists so
the seed can be inserted somewhere durable, and is only touched when
DATABASE_URL is configured.

Public API:
    load_seed(path)                    → list[dict]
    AdvocateStore.from_url(url)        → AdvocateStore
    AdvocateStore.insert(advocates)    → list[dict] (with id + createdAt)
    AdvocateStore.all()                → list[dict]
"""

import json
import os
import sqlite3
from collections.abc import Iterable
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

DATA_DIR  = Path(__file__).parent.parent / "data"
SEED_FILE = DATA_DIR / "advocates.json"

Advocate = dict[str, Any]

REQUIRED_FIELDS: dict[str, type] = {
    "firstName": str,
    "lastName": str,
    "city": str,
    "degree": str,
    "specialties": list,
    "yearsOfExperience": int,
    "phoneNumber": int,
}

OPTIONAL_FIELDS: dict[str, type] = {
    "id": int,
    "createdAt": str,
}

SCHEMA = """
CREATE TABLE IF NOT EXISTS advocates (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL,
    city TEXT NOT NULL,
    degree TEXT NOT NULL,
    specialties TEXT NOT NULL DEFAULT '[]',
    years_of_experience INTEGER NOT NULL,
    phone_number INTEGER NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


class RecordSourceError(Exception):
    """The advocate records could not be loaded or stored."""


# ---------------------------------------------------------------------------
# Seed file
# ---------------------------------------------------------------------------

def _check_type(i: int, field: str, value: Any, kind: type) -> None:
    # bool is an int subclass; reject it for the numeric fields
    if not isinstance(value, kind) or isinstance(value, bool):
        raise RecordSourceError(
            f"Advocate #{i} field {field!r} should be {kind.__name__}, "
            f"got {type(value).__name__}"
        )


def _check_record(i: int, record: Any) -> Advocate:
    if not isinstance(record, dict):
        raise RecordSourceError(f"Advocate #{i} is not an object")
    for field, kind in REQUIRED_FIELDS.items():
        if field not in record:
            raise RecordSourceError(f"Advocate #{i} is missing field {field!r}")
        _check_type(i, field, record[field], kind)
    for field, kind in OPTIONAL_FIELDS.items():
        if record.get(field) is not None:
            _check_type(i, field, record[field], kind)
    if not all(isinstance(s, str) for s in record["specialties"]):
        raise RecordSourceError(f"Advocate #{i} has a non-string specialty")
    if record["yearsOfExperience"] < 0:
        raise RecordSourceError(f"Advocate #{i} has negative yearsOfExperience")
    return record


def load_seed(path: Path | str | None = None) -> list[Advocate]:
    """Load and validate the seed list. Raises RecordSourceError on any problem."""
    if path is None:
        path = os.getenv("ADVOCATES_SEED_FILE") or SEED_FILE
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise RecordSourceError(f"Seed file not found: {path}") from exc
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise RecordSourceError(f"Could not read seed file {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise RecordSourceError(f"Seed file {path} must contain a JSON array")
    return [_check_record(i, r) for i, r in enumerate(raw)]


# ---------------------------------------------------------------------------
# SQLite store
# ---------------------------------------------------------------------------

def database_path(url: str) -> str:
    """Accept either a bare path or a sqlite:/// URL."""
    prefix = "sqlite:///"
    if url.startswith(prefix):
        return url[len(prefix):]
    return url


def _row_to_advocate(row: sqlite3.Row) -> Advocate:
    return {
        "id": row["id"],
        "firstName": row["first_name"],
        "lastName": row["last_name"],
        "city": row["city"],
        "degree": row["degree"],
        "specialties": json.loads(row["specialties"]),
        "yearsOfExperience": row["years_of_experience"],
        "phoneNumber": row["phone_number"],
        "createdAt": row["created_at"],
    }


class AdvocateStore:
    def __init__(self, path: str):
        self.path = path

    @classmethod
    def from_url(cls, url: str) -> "AdvocateStore":
        return cls(database_path(url))

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, always close the connection."""
        try:
            conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise RecordSourceError(f"Could not open database {self.path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        try:
            yield conn.cursor()
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise RecordSourceError(str(exc)) from exc
        finally:
            conn.close()

    def init_schema(self) -> None:
        with self._cursor() as cur:
            cur.executescript(SCHEMA)

    def insert(self, advocates: Iterable[Advocate]) -> list[Advocate]:
        """Insert records and return them as stored (id and createdAt filled in)."""
        self.init_schema()
        ids = []
        with self._cursor() as cur:
            for a in advocates:
                cur.execute(
                    "INSERT INTO advocates (first_name, last_name, city, degree, "
                    "specialties, years_of_experience, phone_number) "
                    "VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (
                        a["firstName"], a["lastName"], a["city"], a["degree"],
                        json.dumps(a["specialties"]), a["yearsOfExperience"],
                        a["phoneNumber"],
                    ),
                )
                ids.append(cur.lastrowid)

        if not ids:
            return []
        placeholders = ", ".join("?" for _ in ids)
        with self._cursor() as cur:
            cur.execute(
                f"SELECT * FROM advocates WHERE id IN ({placeholders}) ORDER BY id", ids
            )
            return [_row_to_advocate(r) for r in cur.fetchall()]

    def all(self) -> list[Advocate]:
        self.init_schema()
        with self._cursor() as cur:
            cur.execute("SELECT * FROM advocates ORDER BY id")
            return [_row_to_advocate(r) for r in cur.fetchall()]
