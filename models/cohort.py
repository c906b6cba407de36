"""
models/cohort.py
----------------
Domain model for a cohort of students and their instructors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from models.entity import Entity

if TYPE_CHECKING:
    from models.instructor import Instructor
    from models.student import Student


@dataclass(eq=False)
class Cohort(Entity):
    """
    A named class of students.

    Attributes:
        name: Unique cohort name (e.g., 'Day Cohort 26').
        id: Database primary key (None for new records).
        instructors: Instructors teaching this cohort, filled by joined reads.
        students: Students enrolled in this cohort, filled by joined reads.
    """
    name: str
    id: Optional[int] = None
    instructors: list[Instructor] = field(default_factory=list)
    students: list[Student] = field(default_factory=list)

    def __str__(self) -> str:
        return self.name
