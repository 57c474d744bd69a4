"""
Directed, integer-weighted graph abstraction.

Vertices are arbitrary hashable labels supplied by the caller.
Edges are directed: u -> v with a non-negative int weight.
"""

from abc import ABC, abstractmethod
from typing import Generic, Hashable, List, Mapping, Optional, Sequence, TypeVar

V = TypeVar("V", bound=Hashable)

# Returned wherever a weight or cost is asked for and none exists.
NO_EDGE = -1


class Graph(ABC, Generic[V]):
    """Directed, weighted graph over hashable vertex labels."""

    @abstractmethod
    def vertices(self) -> List[V]:
        """Return a snapshot of all vertex labels."""
        raise NotImplementedError

    @abstractmethod
    def has_vertex(self, label: V) -> bool:
        raise NotImplementedError

    @abstractmethod
    def edge_weight(self, source: V, target: V) -> int:
        """
        Weight of the edge source -> target.

        Returns NO_EDGE if either vertex is missing or they are not connected.
        """
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, label: V) -> Optional[List[V]]:
        """
        Targets of label's outgoing edges, in insertion order.

        Returns None if label is not a vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, label: V) -> Mapping[V, int]:
        """
        Outgoing neighbors and edge weights for a given vertex.

        Returns: dict[V, int]
        """
        raise NotImplementedError

    def path_cost(self, path: Optional[Sequence[V]]) -> int:
        """
        Sum of edge weights along consecutive vertices of path.

        Returns NO_EDGE for a missing or too-short path, or as soon as a hop
        has no edge.
        """
        if path is None or len(path) < 2:
            return NO_EDGE

        cost = 0
        for u, v in zip(path, path[1:]):
            if u is None or v is None:
                return NO_EDGE
            if not self.has_vertex(u) or not self.has_vertex(v):
                return NO_EDGE
            w = self.edge_weight(u, v)
            if w == NO_EDGE:
                return NO_EDGE
            cost += w
        return cost
