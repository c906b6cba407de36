"""
repositories/student_exercise_repo.py
-------------------------------------
Data access layer for exercise assignments with their full context:
the student (and the student's cohort), the exercise and the assigning instructor.
"""

from db.query import fetch_rows
from mapping.materializer import Collect, Enrich, JoinPlan, materialize
from models.cohort import Cohort
from models.exercise import Exercise
from models.instructor import Instructor
from models.student import Student
from models.student_exercise import StudentExercise
from repositories.rows import row_mapper, select_list

# Row slots: 0 assignment, 1 instructor, 2 student, 3 exercise, 4 student's cohort.
ASSIGNMENT_CONTEXT = JoinPlan(
    shape=(StudentExercise, Instructor, Student, Exercise, Cohort),
    collect=(Collect(2, "assigned_students"), Collect(1, "assigners")),
    enrich=(Enrich(4, "cohort", target=2), Enrich(3, "exercise")),
)


class StudentExerciseRepository:
    """Read-only queries rooted at the student_exercise table."""

    def get_with_context(self) -> dict[int, StudentExercise]:
        """
        Multi-level read of every assignment.

        Returns:
            Dict of assignment id to StudentExercise with `exercise`,
            `assigned_students` (cohort set) and `assigners` filled.
        """
        sql = f"""
            SELECT {select_list(StudentExercise, 'se')},
                   {select_list(Instructor, 'i')},
                   {select_list(Student, 's')},
                   {select_list(Exercise, 'e')},
                   {select_list(Cohort, 'c')}
            FROM student_exercise se
            JOIN instructor i ON i.id = se.instructor_id
            JOIN student s ON s.id = se.student_id
            JOIN exercise e ON e.id = se.exercise_id
            JOIN cohort c ON c.id = s.cohort_id
            ORDER BY se.id;
        """
        rows = fetch_rows(
            sql,
            row_mapper=row_mapper(StudentExercise, Instructor, Student, Exercise, Cohort),
        )
        return materialize(rows, ASSIGNMENT_CONTEXT)
