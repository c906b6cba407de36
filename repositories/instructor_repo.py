"""
repositories/instructor_repo.py
-------------------------------
Data access layer for instructors.
"""

from db.query import fetch_rows
from mapping.materializer import Enrich, JoinPlan, materialize
from models.cohort import Cohort
from models.instructor import Instructor
from repositories.rows import decode, row_mapper, select_list

INSTRUCTOR_COHORT = JoinPlan(
    shape=(Instructor, Cohort),
    enrich=(Enrich(1, "cohort"),),
)


class InstructorRepository:
    """Read-only queries rooted at the instructor table."""

    def get_all(self) -> list[Instructor]:
        """Fetch every instructor, without the joined cohort."""
        sql = f"SELECT {select_list(Instructor, 'i')} FROM instructor i ORDER BY i.id;"
        return fetch_rows(sql, row_mapper=lambda r: decode(Instructor, r))

    def get_with_cohort(self) -> dict[int, Instructor]:
        """
        One-to-one read: every instructor with `cohort` set to the cohort they coach.

        Returns:
            Dict of instructor id to Instructor.
        """
        sql = f"""
            SELECT {select_list(Instructor, 'i')}, {select_list(Cohort, 'c')}
            FROM instructor i
            JOIN cohort c ON c.id = i.cohort_id
            ORDER BY i.id;
        """
        rows = fetch_rows(sql, row_mapper=row_mapper(Instructor, Cohort))
        return materialize(rows, INSTRUCTOR_COHORT)
