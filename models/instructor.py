"""
models/instructor.py
--------------------
Domain model for an instructor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from models.entity import Entity

if TYPE_CHECKING:
    from models.cohort import Cohort


@dataclass(eq=False)
class Instructor(Entity):
    """
    An instructor, assigned to exactly one cohort at a time.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        slack_handle: Slack handle including the leading '@'.
        cohort_id: Foreign key of the cohort being coached.
        specialty: Optional free-text specialty.
        id: Database primary key (None for new records).
        cohort: The joined Cohort, set by one-to-one reads only.
    """
    first_name: str
    last_name: str
    slack_handle: str
    cohort_id: int
    specialty: Optional[str] = None
    id: Optional[int] = None
    cohort: Optional[Cohort] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name
