"""
Algorithm interfaces for path finding.

Keeps search algorithms separate from graph storage.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, List, Optional, Tuple


class PathFinder(ABC):
    """
    Interface for point-to-point shortest-path search over an owned graph.
    """

    @abstractmethod
    def find_path(self, source: Hashable, target: Hashable) -> Optional[Tuple[List[Hashable], Any]]:
        """
        Cheapest path from source to target.

        Returns:
            (ids from source to target inclusive, total weight), or None when
            target is unreachable.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, source: Hashable
    ) -> Tuple[Dict[Hashable, Any], Dict[Hashable, Hashable]]:
        """
        Shortest-path costs plus the predecessor chain for every reachable node.

        Returns:
            (dist, prev) where dist is the cost map and prev records parents.
        """
        raise NotImplementedError
