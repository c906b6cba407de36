"""
repositories/exercise_repo.py
-----------------------------
Data access layer for exercises.
"""

from db.query import fetch_rows
from models.exercise import Exercise
from repositories.rows import decode, select_list


class ExerciseRepository:
    """Read-only queries on the exercise table."""

    def get_all(self) -> list[Exercise]:
        """Fetch every exercise ordered by id."""
        sql = f"SELECT {select_list(Exercise, 'e')} FROM exercise e ORDER BY e.id;"
        return fetch_rows(sql, row_mapper=lambda r: decode(Exercise, r))
