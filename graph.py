"""
Graph capability contract.

Any storage backend (and any view wrapping one) that provides these
operations can be used interchangeably by the views and the path finder.
The contract is structural: implementations do not inherit from it.

Edges are stored directed: u -> v with an arbitrary weight payload.
"""

from typing import Any, Hashable, List, Optional, Protocol, Tuple, runtime_checkable

from nodes import Node


class GraphError(Exception):
    """Base class for rejected graph insertions."""


class IdExists(GraphError):
    """A node with this id is already stored."""

    def __init__(self, node_id: Hashable) -> None:
        super().__init__(f"Node id {node_id!r} already exists.")
        self.node_id = node_id


class IdDoesNotExist(GraphError):
    """An edge endpoint is not a stored node."""

    def __init__(self, node_id: Hashable) -> None:
        super().__init__(f"Node id {node_id!r} does not exist.")
        self.node_id = node_id


class EdgeAlreadyExists(GraphError):
    """The ordered pair (u, v) already carries a weight."""

    def __init__(self, u: Hashable, v: Hashable) -> None:
        super().__init__(f"Edge {u!r} -> {v!r} already exists.")
        self.u = u
        self.v = v


class GraphCorruptionError(RuntimeError):
    """Internal storage invariant violated; not recoverable."""


@runtime_checkable
class Graph(Protocol):
    """Directed, weighted graph over id-keyed nodes."""

    def add_node_with(self, node_id: Hashable, value: Any) -> None:
        """Insert a node. Raises IdExists if the id is taken."""
        ...

    def get_node(self, node_id: Hashable) -> Optional[Node]:
        """Return the stored node (live, mutable) or None."""
        ...

    def contains_node(self, node_id: Hashable) -> bool: ...

    def get(self, node_id: Hashable, default: Any = None) -> Any:
        """Payload of node_id, or default if the node is absent."""
        ...

    def set(self, node_id: Hashable, value: Any) -> None:
        """Replace a stored payload. Raises IdDoesNotExist if absent."""
        ...

    def add_edge_with(self, u: Hashable, v: Hashable, weight: Any) -> None:
        """
        Store weight under the ordered pair (u, v).

        Raises IdDoesNotExist if either endpoint is missing and
        EdgeAlreadyExists if (u, v) is already stored. Nothing is mutated
        when an error is raised.
        """
        ...

    def contains_edge(self, u: Hashable, v: Hashable) -> bool: ...

    def get_weight(self, u: Hashable, v: Hashable) -> Optional[Any]: ...

    def get_adjacent(self, node_id: Hashable) -> List[Hashable]:
        """Ids reachable from node_id over one stored edge; empty if none."""
        ...

    def nodes(self) -> List[Node]: ...

    def edges(self) -> List[Tuple[Hashable, Hashable, Any]]:
        """One (u, v, weight) triple per edge."""
        ...

    def num_nodes(self) -> int: ...

    def num_edges(self) -> int: ...

    def take_nodes(self) -> List[Node]:
        """Drain the graph, handing its nodes to the caller."""
        ...


@runtime_checkable
class GraphReverse(Protocol):
    """Graphs that can be turned into a copy with every edge flipped."""

    def into_reverse(self) -> Graph:
        """Consume self, returning a graph with every (u, v, w) as (v, u, w)."""
        ...
