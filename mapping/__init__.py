"""
mapping/ - Row-to-Graph Layer
=============================
Folds flattened join rows into deduplicated, nested entity graphs.
Pure in-memory code: no database access, only the shared logger from utils.
"""

from mapping.materializer import (
    Collect,
    Enrich,
    JoinPlan,
    RowShapeError,
    materialize,
    materialize_list,
)

__all__ = [
    "Collect",
    "Enrich",
    "JoinPlan",
    "RowShapeError",
    "materialize",
    "materialize_list",
]
