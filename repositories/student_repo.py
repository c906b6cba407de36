"""
repositories/student_repo.py
----------------------------
Data access layer for students and their assigned exercises.
The student_exercise table is the many-to-many link between the two.
"""

from db.query import fetch_rows
from mapping.materializer import Collect, Enrich, JoinPlan, materialize
from models.cohort import Cohort
from models.exercise import Exercise
from models.student import Student
from repositories.rows import decode, row_mapper, select_list

STUDENT_EXERCISES = JoinPlan(
    shape=(Student, Exercise),
    collect=(Collect(1, "assigned_exercises"),),
)

STUDENT_EXERCISES_COHORT = JoinPlan(
    shape=(Student, Exercise, Cohort),
    collect=(Collect(1, "assigned_exercises"),),
    enrich=(Enrich(2, "cohort"),),
)


class StudentRepository:
    """Read-only queries rooted at the student table."""

    def get_all(self) -> list[Student]:
        """Fetch every student, without joined data."""
        sql = f"SELECT {select_list(Student, 's')} FROM student s ORDER BY s.id;"
        return fetch_rows(sql, row_mapper=lambda r: decode(Student, r))

    def get_with_exercises(self) -> dict[int, Student]:
        """
        Many-to-many read: students that have assignments, with their exercises.

        Returns:
            Dict of student id to Student with `assigned_exercises` filled.
        """
        sql = f"""
            SELECT {select_list(Student, 's')}, {select_list(Exercise, 'e')}
            FROM student s
            JOIN student_exercise se ON se.student_id = s.id
            JOIN exercise e ON e.id = se.exercise_id
            ORDER BY s.id, se.id;
        """
        rows = fetch_rows(sql, row_mapper=row_mapper(Student, Exercise))
        return materialize(rows, STUDENT_EXERCISES)

    def get_with_exercises_and_cohort(self) -> dict[int, Student]:
        """Same as `get_with_exercises()` with each student's `cohort` also set."""
        sql = f"""
            SELECT {select_list(Student, 's')},
                   {select_list(Exercise, 'e')},
                   {select_list(Cohort, 'c')}
            FROM student s
            JOIN student_exercise se ON se.student_id = s.id
            JOIN exercise e ON e.id = se.exercise_id
            JOIN cohort c ON c.id = s.cohort_id
            ORDER BY s.id, se.id;
        """
        rows = fetch_rows(sql, row_mapper=row_mapper(Student, Exercise, Cohort))
        return materialize(rows, STUDENT_EXERCISES_COHORT)
