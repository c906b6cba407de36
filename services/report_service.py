"""
services/report_service.py
--------------------------
Turns the repositories' object graphs into printable report lines.
Display-level de-duplication (e.g. unique names under a cohort) lives here,
on top of the id-keyed graphs the repositories return.
"""

from typing import Callable, Hashable, Iterable, TypeVar

from repositories.cohort_repo import CohortRepository
from repositories.exercise_repo import ExerciseRepository
from repositories.instructor_repo import InstructorRepository
from repositories.student_exercise_repo import StudentExerciseRepository
from repositories.student_repo import StudentRepository
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def distinct(items: Iterable[T], key: Callable[[T], Hashable]) -> list[T]:
    """Drop items whose `key` was already seen, keeping first-seen order."""
    seen: set = set()
    result: list[T] = []
    for item in items:
        k = key(item)
        if k not in seen:
            seen.add(k)
            result.append(item)
    return result


class ReportService:
    """
    Builds the roster reports.

    Every `*_report` method returns a list of lines; `REPORTS` maps the CLI
    name of each report to its method, in default display order.
    """

    REPORTS: dict[str, str] = {
        "instructors": "instructors_report",
        "exercises": "exercises_report",
        "students": "students_report",
        "cohorts": "cohorts_report",
        "coaching": "coaching_report",
        "cohort-instructors": "cohort_instructors_report",
        "student-exercises": "student_exercises_report",
        "student-exercises-cohort": "student_exercises_cohort_report",
        "cohort-members": "cohort_members_report",
        "assignments": "assignments_report",
    }

    def __init__(self):
        self.cohort_repo = CohortRepository()
        self.instructor_repo = InstructorRepository()
        self.student_repo = StudentRepository()
        self.exercise_repo = ExerciseRepository()
        self.assignment_repo = StudentExerciseRepository()

    def build(self, name: str) -> list[str]:
        """
        Build a report by its CLI name.

        Raises:
            KeyError: If `name` is not a known report.
        """
        method = getattr(self, self.REPORTS[name])
        lines = method()
        logger.debug(f"Report '{name}' produced {len(lines)} lines")
        return lines

    # ── Single-table reads ────────────────────────────────

    def instructors_report(self) -> list[str]:
        return [i.full_name for i in self.instructor_repo.get_all()]

    def exercises_report(self) -> list[str]:
        return [e.name for e in self.exercise_repo.get_all()]

    def students_report(self) -> list[str]:
        return [s.full_name for s in self.student_repo.get_all()]

    def cohorts_report(self) -> list[str]:
        return [c.name for c in self.cohort_repo.get_all()]

    # ── Joined reads ──────────────────────────────────────

    def coaching_report(self) -> list[str]:
        """One line per instructor naming the cohort they coach."""
        return [
            f"{i.full_name} ({i.slack_handle}) is coaching {i.cohort.name}"
            for i in self.instructor_repo.get_with_cohort().values()
        ]

    def cohort_instructors_report(self) -> list[str]:
        """Instructor head-count per cohort."""
        return [
            f"{c.name} has {len(c.instructors)} instructors."
            for c in self.cohort_repo.get_with_instructors().values()
        ]

    def student_exercises_report(self) -> list[str]:
        """Exercises each student is working on."""
        return [
            f"{s.full_name} is working on {_exercise_names(s)}."
            for s in self.student_repo.get_with_exercises().values()
        ]

    def student_exercises_cohort_report(self) -> list[str]:
        """Exercises each student is working on, with the student's cohort."""
        return [
            f"{s.full_name} in {s.cohort.name} is working on {_exercise_names(s)}."
            for s in self.student_repo.get_with_exercises_and_cohort().values()
        ]

    def cohort_members_report(self) -> list[str]:
        """
        Students and instructors per cohort.

        The underlying query repeats people once per row of the other join,
        so names are de-duplicated here.
        """
        lines = []
        for cohort in self.cohort_repo.get_with_members().values():
            students = distinct(cohort.students, key=lambda s: s.full_name)
            instructors = distinct(cohort.instructors, key=lambda i: i.full_name)
            lines.append(
                f"{cohort.name}:\n"
                f"    Students: {', '.join(s.full_name for s in students)}\n"
                f"    Instructors: {', '.join(i.full_name for i in instructors)}"
            )
        return lines

    def assignments_report(self) -> list[str]:
        """Who is assigned to which exercise, and by whom."""
        lines = []
        for assignment in self.assignment_repo.get_with_context().values():
            students = distinct(assignment.assigned_students, key=lambda s: s.id)
            assigners = distinct(assignment.assigners, key=lambda i: i.full_name)
            who = " and ".join(f"{s.full_name} in {s.cohort.name}" for s in students)
            lines.append(
                f"{who} is assigned to {assignment.exercise.name} "
                f"by {', '.join(i.full_name for i in assigners)}"
            )
        return lines


def _exercise_names(student) -> str:
    return ",".join(e.name for e in student.assigned_exercises)
