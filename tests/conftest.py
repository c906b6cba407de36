from unittest.mock import MagicMock

import pytest


class FakeFetch:
    """Stands in for `db.query.fetch_rows`, feeding canned raw rows through the row mapper."""

    def __init__(self, raw_rows):
        self.raw_rows = raw_rows
        self.calls = []

    def __call__(self, sql, params=None, row_mapper=None):
        self.calls.append((sql, params))
        if row_mapper is None:
            return list(self.raw_rows)
        return [row_mapper(r) for r in self.raw_rows]

    @property
    def sql(self) -> str:
        return self.calls[-1][0]


@pytest.fixture()
def fake_fetch(monkeypatch):
    """Patch `fetch_rows` inside a repository module with canned raw rows."""

    def _install(module, raw_rows):
        fake = FakeFetch(raw_rows)
        monkeypatch.setattr(module, "fetch_rows", fake)
        return fake

    return _install


@pytest.fixture()
def fake_conn():
    """A psycopg2-like connection whose cursor works as a context manager."""
    conn = MagicMock()
    cur = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cur
    conn.cur = cur
    return conn
