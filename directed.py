"""
Directed and undirected views over a Graph backend.

Both views own the backend they wrap and add no storage of their own.
Directed forwards every call unchanged; Undirected stores each logical
edge as the two directed edges (u, v) and (v, u) with the same weight.
"""

import copy
from typing import Any, Hashable, Iterable, List, Optional, Set, Tuple

from graph import Graph, IdDoesNotExist
from hash_graph import HashGraph
from nodes import Node
from weights import UNIT


class Directed:
    """Marks a backend's edges as directional; behaviour is the backend's."""

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    def into_inner(self) -> Graph:
        return self._graph

    def into_reverse(self) -> "Directed":
        return Directed(self._graph.into_reverse())

    # --- Mutation helpers ----------------------------------------------------

    def add_node(self, node_id: Hashable) -> None:
        self.add_node_with(node_id, None)

    def add_nodes(self, node_ids: Iterable[Hashable]) -> None:
        for node_id in node_ids:
            self.add_node_with(node_id, None)

    def add_nodes_with(self, node_ids: Iterable[Hashable], value: Any) -> None:
        for node_id in node_ids:
            self.add_node_with(node_id, value)

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        self.add_edge_with(u, v, UNIT)

    # --- Payload access ------------------------------------------------------

    def get(self, node_id: Hashable, default: Any = None) -> Any:
        return _payload(self._graph, node_id, default)

    def set(self, node_id: Hashable, value: Any) -> None:
        _set_payload(self._graph, node_id, value)

    # --- Graph interface -----------------------------------------------------

    def add_node_with(self, node_id: Hashable, value: Any) -> None:
        self._graph.add_node_with(node_id, value)

    def get_node(self, node_id: Hashable) -> Optional[Node]:
        return self._graph.get_node(node_id)

    def contains_node(self, node_id: Hashable) -> bool:
        return self._graph.contains_node(node_id)

    def add_edge_with(self, u: Hashable, v: Hashable, weight: Any) -> None:
        self._graph.add_edge_with(u, v, weight)

    def contains_edge(self, u: Hashable, v: Hashable) -> bool:
        return self._graph.contains_edge(u, v)

    def get_weight(self, u: Hashable, v: Hashable) -> Optional[Any]:
        return self._graph.get_weight(u, v)

    def get_adjacent(self, node_id: Hashable) -> List[Hashable]:
        return self._graph.get_adjacent(node_id)

    def nodes(self) -> List[Node]:
        return self._graph.nodes()

    def edges(self) -> List[Tuple[Hashable, Hashable, Any]]:
        return self._graph.edges()

    def num_nodes(self) -> int:
        return self._graph.num_nodes()

    def num_edges(self) -> int:
        return self._graph.num_edges()

    def take_nodes(self) -> List[Node]:
        return self._graph.take_nodes()


class Undirected:
    """
    Undirected view: a logical edge {u, v} is two stored directed edges.

    add_edge_with inserts (u, v) and then (v, u). The two inserts are not
    atomic as a pair: if the second is rejected, the first stays stored.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    def into_inner(self) -> Graph:
        return self._graph

    # --- Mutation helpers ----------------------------------------------------

    def add_node(self, node_id: Hashable) -> None:
        self.add_node_with(node_id, None)

    def add_nodes(self, node_ids: Iterable[Hashable]) -> None:
        for node_id in node_ids:
            self.add_node_with(node_id, None)

    def add_nodes_with(self, node_ids: Iterable[Hashable], value: Any) -> None:
        for node_id in node_ids:
            self.add_node_with(node_id, value)

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        self.add_edge_with(u, v, UNIT)

    # --- Payload access ------------------------------------------------------

    def get(self, node_id: Hashable, default: Any = None) -> Any:
        return _payload(self._graph, node_id, default)

    def set(self, node_id: Hashable, value: Any) -> None:
        _set_payload(self._graph, node_id, value)

    # --- Graph interface -----------------------------------------------------

    def add_node_with(self, node_id: Hashable, value: Any) -> None:
        self._graph.add_node_with(node_id, value)

    def get_node(self, node_id: Hashable) -> Optional[Node]:
        return self._graph.get_node(node_id)

    def contains_node(self, node_id: Hashable) -> bool:
        return self._graph.contains_node(node_id)

    def add_edge_with(self, u: Hashable, v: Hashable, weight: Any) -> None:
        self._graph.add_edge_with(u, v, copy.deepcopy(weight))
        self._graph.add_edge_with(v, u, weight)

    def contains_edge(self, u: Hashable, v: Hashable) -> bool:
        return self._graph.contains_edge(u, v)

    def get_weight(self, u: Hashable, v: Hashable) -> Optional[Any]:
        return self._graph.get_weight(u, v)

    def get_adjacent(self, node_id: Hashable) -> List[Hashable]:
        return self._graph.get_adjacent(node_id)

    def nodes(self) -> List[Node]:
        return self._graph.nodes()

    def edges(self) -> List[Tuple[Hashable, Hashable, Any]]:
        """One triple per logical edge, in the order it was first stored."""
        seen: Set[Tuple[Hashable, Hashable]] = set()
        out = []
        for u, v, w in self._graph.edges():
            if (v, u) in seen:
                continue
            seen.add((u, v))
            out.append((u, v, w))
        return out

    def num_nodes(self) -> int:
        return self._graph.num_nodes()

    def num_edges(self) -> int:
        return self._graph.num_edges() // 2

    def take_nodes(self) -> List[Node]:
        return self._graph.take_nodes()


def _payload(graph: Graph, node_id: Hashable, default: Any) -> Any:
    node = graph.get_node(node_id)
    return default if node is None else node.value


def _set_payload(graph: Graph, node_id: Hashable, value: Any) -> None:
    node = graph.get_node(node_id)
    if node is None:
        raise IdDoesNotExist(node_id)
    node.value = value


def new_hashed_directed() -> Directed:
    return Directed(HashGraph())


def new_hashed_undirected() -> Undirected:
    return Undirected(HashGraph())
