"""
Concrete directed, weighted graph backed by hash maps.

Implements the Graph contract with three structures kept in sync:
an id -> Node map, an id -> (neighbour id -> weight) adjacency map and an
insertion-ordered edge list used for deterministic enumeration.
"""

import copy
import logging
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from graph import EdgeAlreadyExists, GraphCorruptionError, IdDoesNotExist, IdExists
from nodes import Node
from weights import UNIT


logger = logging.getLogger(__name__)


class HashGraph:
    """
    Directed, weighted graph over id-keyed nodes.

    Nothing is ever removed: nodes and edges only enter through the
    insertion methods, and only the draining transforms (take_nodes,
    disassemble, into_reverse, into_unwrapped) empty the graph.
    """

    def __init__(self) -> None:
        self._nodes: Dict[Hashable, Node] = {}
        self._adjacency: Dict[Hashable, Dict[Hashable, Any]] = {}
        self._edges: List[Tuple[Hashable, Hashable]] = []
        self._num_nodes = 0
        self._num_edges = 0

    @classmethod
    def from_parts(
        cls,
        nodes: Iterable[Tuple[Hashable, Any]],
        edges: Iterable[Tuple[Hashable, Hashable, Any]],
    ) -> "HashGraph":
        """Build a graph from (id, value) pairs and (u, v, weight) triples."""
        graph = cls()
        graph.populate(nodes, edges)
        return graph

    # --- Graph interface -----------------------------------------------------

    def add_node_with(self, node_id: Hashable, value: Any) -> None:
        if node_id in self._nodes:
            logger.debug("Rejected duplicate node id %r", node_id)
            raise IdExists(node_id)

        self._nodes[node_id] = Node(node_id, value)
        self._num_nodes += 1

    def get_node(self, node_id: Hashable) -> Optional[Node]:
        return self._nodes.get(node_id)

    def contains_node(self, node_id: Hashable) -> bool:
        return node_id in self._nodes

    def add_edge_with(self, u: Hashable, v: Hashable, weight: Any) -> None:
        # Validate everything before touching storage.
        for endpoint in (u, v):
            if endpoint not in self._nodes:
                logger.debug("Rejected edge %r -> %r: missing node %r", u, v, endpoint)
                raise IdDoesNotExist(endpoint)

        out = self._adjacency.get(u)
        if out is not None and v in out:
            logger.debug("Rejected duplicate edge %r -> %r", u, v)
            raise EdgeAlreadyExists(u, v)

        self._adjacency.setdefault(u, {})[v] = weight
        self._edges.append((u, v))
        self._num_edges += 1

    def contains_edge(self, u: Hashable, v: Hashable) -> bool:
        if u not in self._nodes or v not in self._nodes:
            return False
        return v in self._adjacency.get(u, {})

    def get_weight(self, u: Hashable, v: Hashable) -> Optional[Any]:
        if not self.contains_edge(u, v):
            return None
        return self._adjacency[u][v]

    def get_adjacent(self, node_id: Hashable) -> List[Hashable]:
        return list(self._adjacency.get(node_id, {}))

    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def edges(self) -> List[Tuple[Hashable, Hashable, Any]]:
        return [(u, v, self._stored_weight(u, v)) for u, v in self._edges]

    def num_nodes(self) -> int:
        return self._num_nodes

    def num_edges(self) -> int:
        return self._num_edges

    def take_nodes(self) -> List[Node]:
        nodes = list(self._nodes.values())
        self._reset()
        return nodes

    # --- Payload access ------------------------------------------------------

    def get(self, node_id: Hashable, default: Any = None) -> Any:
        """Payload of node_id, or default if the node is absent."""
        node = self._nodes.get(node_id)
        return default if node is None else node.value

    def set(self, node_id: Hashable, value: Any) -> None:
        """Replace the payload of an existing node."""
        node = self._nodes.get(node_id)
        if node is None:
            raise IdDoesNotExist(node_id)
        node.value = value

    def __getitem__(self, key: Any) -> Any:
        """
        ``graph[node_id]`` reads a payload, ``graph[(u, v)]`` reads a weight.

        Raises KeyError when the node or edge is not stored. A 2-tuple that
        is itself a stored node id reads that node's payload.
        """
        if isinstance(key, tuple) and len(key) == 2 and key not in self._nodes:
            u, v = key
            if not self.contains_edge(u, v):
                raise KeyError(key)
            return self._adjacency[u][v]
        if key not in self._nodes:
            raise KeyError(key)
        return self._nodes[key].value

    def __setitem__(self, node_id: Hashable, value: Any) -> None:
        if node_id not in self._nodes:
            raise KeyError(node_id)
        self._nodes[node_id].value = value

    # --- Bulk insertion ------------------------------------------------------

    def add_nodes_with(self, node_ids: Iterable[Hashable], value: Any) -> None:
        """
        Add every id with the same payload.

        Stops at the first failure; nodes added before it stay in place.
        """
        for node_id in node_ids:
            self.add_node_with(node_id, value)

    def add_nodes(self, node_ids: Iterable[Hashable]) -> None:
        self.add_nodes_with(node_ids, None)

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """Add an unweighted edge u -> v."""
        self.add_edge_with(u, v, UNIT)

    def populate(
        self,
        nodes: Iterable[Tuple[Hashable, Any]],
        edges: Iterable[Tuple[Hashable, Hashable, Any]],
    ) -> None:
        """
        Replay node pairs, then edge triples, through the insertion methods.

        Not transactional: the first failure propagates and everything
        inserted before it stays on this graph.
        """
        for node_id, value in nodes:
            self.add_node_with(node_id, value)
        for u, v, weight in edges:
            self.add_edge_with(u, v, weight)

    # --- Transforms ----------------------------------------------------------

    def clone(self) -> "HashGraph":
        """Independent deep copy; the two graphs never share storage."""
        other = type(self)()
        other._nodes = {
            node_id: Node(node_id, copy.deepcopy(node.value))
            for node_id, node in self._nodes.items()
        }
        other._adjacency = {
            u: {v: copy.deepcopy(w) for v, w in out.items()}
            for u, out in self._adjacency.items()
        }
        other._edges = list(self._edges)
        other._num_nodes = self._num_nodes
        other._num_edges = self._num_edges
        return other

    def disassemble(self) -> Tuple[List[Node], List[Tuple[Hashable, Hashable, Any]]]:
        """Drain the graph into its nodes and flattened (u, v, weight) edges."""
        edges = self.edges()
        nodes = self.take_nodes()
        return nodes, edges

    def into_reverse(self) -> "HashGraph":
        nodes, edges = self.disassemble()
        return type(self).from_parts(
            ((node.id, node.value) for node in nodes),
            ((v, u, w) for u, v, w in edges),
        )

    def into_unwrapped(self) -> Optional["HashGraph"]:
        """
        Unwrap optional payloads.

        Returns None, leaving this graph untouched, if any payload is None.
        Otherwise drains this graph into a new one with identical contents.
        """
        if any(node.value is None for node in self._nodes.values()):
            return None

        nodes, edges = self.disassemble()
        return type(self).from_parts(
            ((node.id, node.value) for node in nodes), edges
        )

    # --- Internal helpers ----------------------------------------------------

    def _stored_weight(self, u: Hashable, v: Hashable) -> Any:
        try:
            return self._adjacency[u][v]
        except KeyError:
            raise GraphCorruptionError(
                f"Edge {u!r} -> {v!r} is listed but has no stored weight."
            ) from None

    def _reset(self) -> None:
        self._nodes = {}
        self._adjacency = {}
        self._edges = []
        self._num_nodes = 0
        self._num_edges = 0
