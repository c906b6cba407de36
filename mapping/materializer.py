"""
mapping/materializer.py
-----------------------
Generic fold from flattened join rows to entity graphs.

A join query returns one row per combination of joined records, so a cohort
with three instructors comes back as three rows that all repeat the cohort.
`materialize()` walks those rows once, keeps the first root instance it sees
for every id (the *resident* root) and appends each row's children to it.

Every read shape is described by a `JoinPlan`:

    COHORT_INSTRUCTORS = JoinPlan(
        shape=(Cohort, Instructor),
        collect=(Collect(1, "instructors"),),
    )

    cohorts = materialize(rows, COHORT_INSTRUCTORS)   # {cohort_id: Cohort}
"""

from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Iterable, Sequence

from utils.logger import get_logger

logger = get_logger(__name__)


class RowShapeError(TypeError):
    """A row does not match the entity types declared by its JoinPlan."""


@dataclass(frozen=True)
class Collect:
    """Append ``row[index]`` to the list attribute `attr` of the resident root."""
    index: int
    attr: str


@dataclass(frozen=True)
class Enrich:
    """
    Set ``row[target].<attr> = row[index]``.

    Slot 0 always means the resident root, so ``target=0`` enriches the root
    (last write wins) while any other target enriches that row's own child
    before it is collected.
    """
    index: int
    attr: str
    target: int = 0


@dataclass(frozen=True)
class JoinPlan:
    """
    How to fold one join query.

    Attributes:
        shape: Entity type expected in each row slot, root first, then join order.
        collect: Child slots appended to root collections.
        enrich: Single-valued assignments applied per row.
    """
    shape: tuple[type, ...]
    collect: tuple[Collect, ...] = ()
    enrich: tuple[Enrich, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", tuple(self.shape))
        object.__setattr__(self, "collect", tuple(self.collect))
        object.__setattr__(self, "enrich", tuple(self.enrich))

        if not self.shape:
            raise ValueError("JoinPlan needs at least a root type")
        width = len(self.shape)
        for step in self.collect:
            if not 0 < step.index < width:
                raise ValueError(
                    f"Collect index {step.index} must address a child slot (1..{width - 1})"
                )
            _check_attr(self.shape[0], step)
        for step in self.enrich:
            if not (0 <= step.index < width and 0 <= step.target < width):
                raise ValueError(f"Enrich {step} is outside the row width {width}")
            if step.index == step.target:
                raise ValueError(f"Enrich {step} assigns a slot to itself")
            _check_attr(self.shape[step.target], step)

    @property
    def root_type(self) -> type:
        return self.shape[0]


def _check_attr(entity: type, step: "Collect | Enrich") -> None:
    """Reject plan steps naming an attribute the target dataclass does not declare."""
    if not is_dataclass(entity):
        return
    if step.attr not in {f.name for f in fields(entity)}:
        raise ValueError(
            f"{type(step).__name__} attribute '{step.attr}' is not a field of {entity.__name__}"
        )


def _check_row(row: Any, shape: tuple[type, ...], number: int) -> None:
    """Fail fast on rows that do not match the declared join order."""
    if not isinstance(row, (tuple, list)):
        raise RowShapeError(
            f"Row {number}: expected a tuple of {len(shape)} entities, got {type(row).__name__}"
        )
    if len(row) != len(shape):
        raise RowShapeError(
            f"Row {number}: expected {len(shape)} slots, got {len(row)}"
        )
    if row[0] is None:
        raise RowShapeError(f"Row {number}: root slot is empty")
    for slot, (value, expected) in enumerate(zip(row, shape)):
        if value is not None and not isinstance(value, expected):
            raise RowShapeError(
                f"Row {number}, slot {slot}: expected {expected.__name__}, "
                f"got {type(value).__name__}"
            )
    if row[0].id is None:
        raise RowShapeError(f"Row {number}: root {shape[0].__name__} has no id")


def _assign(slots: Sequence[Any], step: Enrich) -> None:
    value = slots[step.index]
    target = slots[step.target]
    if value is None or target is None:
        return
    setattr(target, step.attr, value)


def materialize(rows: Iterable[Sequence[Any]], plan: JoinPlan) -> dict[int, Any]:
    """
    Fold join rows into a mapping of root id to fully populated root entity.

    Rows are consumed once, left to right. For each row the resident root is
    looked up by the row's root id (inserting the row's root on first sight),
    child enrichments run on the row's own children, then every non-empty
    collect slot is appended to the resident root, and finally root
    enrichments overwrite the resident root's single-valued fields.

    Args:
        rows: Decoded join rows, each holding one entity (or None for an empty
            outer-join slot) per type in ``plan.shape``.
        plan: The JoinPlan describing the read shape.

    Returns:
        Dict keyed by root id, in order of each id's first appearance.

    Raises:
        RowShapeError: If a row does not match ``plan.shape``.
    """
    graph: dict[int, Any] = {}
    child_enrich = [step for step in plan.enrich if step.target != 0]
    root_enrich = [step for step in plan.enrich if step.target == 0]

    count = 0
    for count, row in enumerate(rows, start=1):
        _check_row(row, plan.shape, count)
        resident = graph.setdefault(row[0].id, row[0])
        slots = (resident, *row[1:])

        for step in child_enrich:
            _assign(slots, step)
        for step in plan.collect:
            child = slots[step.index]
            if child is not None:
                getattr(resident, step.attr).append(child)
        for step in root_enrich:
            _assign(slots, step)

    logger.debug(
        f"Folded {count} rows into {len(graph)} {plan.root_type.__name__} graphs"
    )
    return graph


def materialize_list(rows: Iterable[Sequence[Any]], plan: JoinPlan) -> list:
    """Like `materialize()` but return only the root entities, in first-seen order."""
    return list(materialize(rows, plan).values())
