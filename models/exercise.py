"""
models/exercise.py
------------------
Domain model for a coding exercise. Reference data, never changed after seeding.
"""

from dataclasses import dataclass
from typing import Optional

from models.entity import Entity


@dataclass(eq=False)
class Exercise(Entity):
    """
    Attributes:
        name: Exercise title (e.g., 'Nutshell').
        language: Free-text language tag (e.g., 'JavaScript').
        id: Database primary key (None for new records).
    """
    name: str
    language: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name} ({self.language})"
