"""
Heap-based path finding over any Graph implementation.

Uses Python's heapq as a lazy-deletion priority queue: an improved distance
pushes a fresh entry instead of updating the old one, and entries for
already-settled nodes are skipped when popped.
"""

from typing import Any, Dict, Hashable, List, Optional, Set, Tuple
import heapq
import itertools
import logging

from algorithms import PathFinder
from graph import Graph, GraphCorruptionError
from weights import into_weight


logger = logging.getLogger(__name__)


class StatelessPathFinder(PathFinder):
    """
    Single-source Dijkstra over an owned graph.

    Edge weights go through into_weight(), so the same engine searches
    unweighted graphs (hop count) and numerically weighted ones. Weights
    must be non-negative. The graph is only read, never mutated.

    Complexity:
        O(E log E) over the part of the graph reachable from the source.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    @property
    def graph(self) -> Graph:
        return self._graph

    def find_path(self, source: Hashable, target: Hashable) -> Optional[Tuple[List[Hashable], Any]]:
        """
        Cheapest path from source to target, stopping once target is settled.

        When several paths tie for cheapest, which one comes back is not
        specified.
        """
        _, prev, visited = self._search(source, target)
        if target not in visited:
            return None

        path = [target]
        total: Any = 0
        node = target
        while node in prev:
            parent = prev[node]
            total = total + self._edge_weight(parent, node)
            path.append(parent)
            node = parent

        path.reverse()
        return path, total

    def shortest_paths(
        self, source: Hashable
    ) -> Tuple[Dict[Hashable, Any], Dict[Hashable, Hashable]]:
        """
        Full single-source run, no early exit.

        Unreachable nodes are absent from both maps, and the source has no
        entry in prev because it has no parent.
        """
        dist, prev, _ = self._search(source)
        return dist, prev

    def shortest_path_costs(self, source: Hashable) -> Dict[Hashable, Any]:
        """Only the cost map for all nodes reachable from source."""
        dist, _, _ = self._search(source)
        return dist

    # --- Internal helpers ---------------------------------------------------

    def _search(
        self, source: Hashable, target: Optional[Hashable] = None
    ) -> Tuple[Dict[Hashable, Any], Dict[Hashable, Hashable], Set[Hashable]]:
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

        dist: Dict[Hashable, Any] = {source: 0}
        prev: Dict[Hashable, Hashable] = {}
        visited: Set[Hashable] = set()

        # Entries are (distance, tiebreak, id); ids themselves never get compared.
        tiebreak = itertools.count()
        pq = [(0, next(tiebreak), source)]
        self.last_heap_pushes += 1
        stop_at_target = target is not None

        while pq:
            _, _, current = heapq.heappop(pq)
            self.last_heap_pops += 1

            # Stale entry for an already-settled node
            if current in visited:
                continue

            visited.add(current)
            if stop_at_target and current == target:
                break

            current_distance = dist[current]
            for adj in self._graph.get_adjacent(current):
                if adj in visited:
                    continue

                self.last_edges_examined += 1
                alt = current_distance + self._edge_weight(current, adj)
                if adj not in dist or alt < dist[adj]:
                    dist[adj] = alt
                    prev[adj] = current
                    heapq.heappush(pq, (alt, next(tiebreak), adj))
                    self.last_heap_pushes += 1
                    self.last_relaxed += 1

        logger.debug(
            "Search from %r settled %d nodes (%d pops, %d pushes)",
            source,
            len(visited),
            self.last_heap_pops,
            self.last_heap_pushes,
        )
        return dist, prev, visited

    def _edge_weight(self, u: Hashable, v: Hashable) -> Any:
        stored = self._graph.get_weight(u, v)
        if stored is None and not self._graph.contains_edge(u, v):
            raise GraphCorruptionError(f"Adjacent pair {u!r} -> {v!r} has no stored edge.")

        weight = into_weight(stored)
        if weight < 0:
            raise ValueError(f"Edge {u!r} -> {v!r} has negative weight {weight!r}.")
        return weight
