"""
repositories/rows.py
--------------------
Column lists and decoders shared by all repositories.

Each entity type maps to its table columns, named exactly like the model's
dataclass fields. A joined SELECT lists the column groups in join order, and
`row_mapper()` cuts every flat result row back into one entity per group.
"""

from typing import Any, Callable, Optional, Sequence

from models.cohort import Cohort
from models.exercise import Exercise
from models.instructor import Instructor
from models.student import Student
from models.student_exercise import StudentExercise

COLUMNS: dict[type, tuple[str, ...]] = {
    Cohort: ("id", "name"),
    Instructor: ("id", "first_name", "last_name", "slack_handle", "specialty", "cohort_id"),
    Student: ("id", "first_name", "last_name", "slack_handle", "cohort_id"),
    Exercise: ("id", "name", "language"),
    StudentExercise: ("id", "student_id", "exercise_id", "instructor_id"),
}


def select_list(entity: type, alias: str) -> str:
    """Render the column group of `entity`, e.g. ``"c.id, c.name"`` for Cohort."""
    return ", ".join(f"{alias}.{col}" for col in COLUMNS[entity])


def decode(entity: type, values: Sequence[Any]) -> Optional[Any]:
    """
    Build one entity from its slice of a result row.

    A NULL id means the slot came from an unmatched outer join, so no
    entity is built and None is returned.
    """
    if values[0] is None:
        return None
    return entity(**dict(zip(COLUMNS[entity], values)))


def row_mapper(*entities: type) -> Callable[[tuple], tuple]:
    """
    Return a mapper that splits a flat row into one entity per type in `entities`.

    Raises:
        ValueError: When a row is shorter or longer than the column groups.
    """
    widths = [len(COLUMNS[e]) for e in entities]
    total = sum(widths)

    def _map(row: tuple) -> tuple:
        if len(row) != total:
            raise ValueError(f"Expected {total} columns, got {len(row)}")
        decoded = []
        start = 0
        for entity, width in zip(entities, widths):
            decoded.append(decode(entity, row[start:start + width]))
            start += width
        return tuple(decoded)

    return _map
