"""
Helpers written against the Graph contract.

Auto-incrementing ids: probe upward from num_nodes() for the first id no
stored node uses. Intended for graphs keyed by integers.
"""

from typing import Any, Iterable, List

from graph import Graph


def _next_free_id(graph: Graph, start: int) -> int:
    node_id = start
    while graph.contains_node(node_id):
        node_id += 1
    return node_id


def add_node_auto_id(graph: Graph, value: Any) -> int:
    """Insert value under the next free integer id and return that id."""
    node_id = _next_free_id(graph, graph.num_nodes())
    graph.add_node_with(node_id, value)
    return node_id


def add_nodes_auto_id(graph: Graph, values: Iterable[Any]) -> List[int]:
    """
    Insert each value under consecutive free ids.

    Returns the ids in the order of values.
    """
    ids: List[int] = []
    node_id = graph.num_nodes()
    for value in values:
        node_id = _next_free_id(graph, node_id)
        graph.add_node_with(node_id, value)
        ids.append(node_id)
        node_id += 1
    return ids
