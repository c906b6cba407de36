"""
repositories/cohort_repo.py
---------------------------
Data access layer for cohorts and the people assigned to them.
"""

from db.query import fetch_rows
from mapping.materializer import Collect, JoinPlan, materialize
from models.cohort import Cohort
from models.instructor import Instructor
from models.student import Student
from repositories.rows import decode, row_mapper, select_list
from utils.logger import get_logger

logger = get_logger(__name__)

COHORT_INSTRUCTORS = JoinPlan(
    shape=(Cohort, Instructor),
    collect=(Collect(1, "instructors"),),
)

COHORT_MEMBERS = JoinPlan(
    shape=(Cohort, Student, Instructor),
    collect=(Collect(1, "students"), Collect(2, "instructors")),
)


class CohortRepository:
    """Read-only queries rooted at the cohort table."""

    def get_all(self) -> list[Cohort]:
        """Fetch every cohort, without joined collections."""
        sql = f"SELECT {select_list(Cohort, 'c')} FROM cohort c ORDER BY c.id;"
        return fetch_rows(sql, row_mapper=lambda r: decode(Cohort, r))

    def get_with_instructors(self) -> dict[int, Cohort]:
        """
        One-to-many read: every cohort with its instructors.

        Cohorts without instructors are kept (LEFT JOIN) with an empty list.

        Returns:
            Dict of cohort id to Cohort, in cohort id order.
        """
        sql = f"""
            SELECT {select_list(Cohort, 'c')}, {select_list(Instructor, 'i')}
            FROM cohort c
            LEFT JOIN instructor i ON i.cohort_id = c.id
            ORDER BY c.id, i.id;
        """
        rows = fetch_rows(sql, row_mapper=row_mapper(Cohort, Instructor))
        cohorts = materialize(rows, COHORT_INSTRUCTORS)
        logger.debug(f"Loaded {len(cohorts)} cohorts with instructors")
        return cohorts

    def get_with_members(self) -> dict[int, Cohort]:
        """
        Students and instructors of each cohort in a single query.

        The two joins multiply: a cohort with 2 students and 2 instructors yields
        4 rows, so both collections hold repeated entries. Callers that list
        people should de-duplicate (see `services.report_service.distinct`).
        Only cohorts with at least one student and one instructor are returned.
        """
        sql = f"""
            SELECT {select_list(Cohort, 'c')},
                   {select_list(Student, 's')},
                   {select_list(Instructor, 'i')}
            FROM cohort c
            JOIN student s ON s.cohort_id = c.id
            JOIN instructor i ON i.cohort_id = c.id
            ORDER BY c.id, s.id, i.id;
        """
        rows = fetch_rows(sql, row_mapper=row_mapper(Cohort, Student, Instructor))
        return materialize(rows, COHORT_MEMBERS)
