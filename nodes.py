"""
Node abstraction for the graph library.

A node pairs an immutable id with a mutable payload. Identity is the id
alone: two nodes with the same id are equal and hash the same, whatever
their payloads hold.
"""

from dataclasses import dataclass
from typing import Any, Generic, Hashable, Tuple, TypeVar


ID = TypeVar("ID", bound=Hashable)
T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[ID, T]):
    """Id-keyed container for a node payload."""

    _id: ID
    value: T = None  # type: ignore[assignment]

    @property
    def id(self) -> ID:
        return self._id

    def is_id(self, other: Any) -> bool:
        return self._id == other

    def into_tuple(self) -> Tuple[ID, T]:
        return self._id, self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)
