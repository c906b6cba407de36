"""
models/entity.py
----------------
Identity shared by every roster record.
"""


class Entity:
    """
    Mixin giving dataclass records id-based identity.

    Two records are equal when they are of the same type and carry the same
    database id, whatever their other fields hold. Records without an id
    (not yet persisted) only equal themselves.
    """

    id: int | None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        if type(other) is not type(self):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return object.__hash__(self)
        return hash((type(self).__name__, self.id))
