"""
models/ - Domain Layer
======================
Plain dataclass records for cohorts, instructors, students, exercises
and exercise assignments. No database access happens here.
"""
