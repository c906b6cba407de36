"""
models/student.py
-----------------
Domain model for a student and the exercises assigned to them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from models.entity import Entity

if TYPE_CHECKING:
    from models.cohort import Cohort
    from models.exercise import Exercise


@dataclass(eq=False)
class Student(Entity):
    """
    A student enrolled in one cohort.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        slack_handle: Slack handle including the leading '@'.
        cohort_id: Foreign key of the student's cohort.
        id: Database primary key (None for new records).
        cohort: The joined Cohort, when the read includes it.
        assigned_exercises: Exercises assigned through student_exercise rows.
    """
    first_name: str
    last_name: str
    slack_handle: str
    cohort_id: int
    id: Optional[int] = None
    cohort: Optional[Cohort] = None
    assigned_exercises: list[Exercise] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name
