"""
models/student_exercise.py
--------------------------
Domain model for one exercise assignment: one student, one exercise,
one assigning instructor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from models.entity import Entity

if TYPE_CHECKING:
    from models.exercise import Exercise
    from models.instructor import Instructor
    from models.student import Student


@dataclass(eq=False)
class StudentExercise(Entity):
    """
    An assignment event.

    Only the three foreign keys and the id are persisted. `exercise`,
    `assigned_students` and `assigners` are filled when the assignment is
    read together with its joined rows.

    Attributes:
        student_id: Foreign key of the assigned student.
        exercise_id: Foreign key of the exercise.
        instructor_id: Foreign key of the assigning instructor.
        id: Database primary key (None for new records).
        exercise: The joined Exercise.
        assigned_students: Joined Students, each carrying its Cohort.
        assigners: Joined Instructors who made the assignment.
    """
    student_id: int
    exercise_id: int
    instructor_id: int
    id: Optional[int] = None
    exercise: Optional[Exercise] = None
    assigned_students: list[Student] = field(default_factory=list)
    assigners: list[Instructor] = field(default_factory=list)
