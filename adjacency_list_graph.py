"""
Concrete directed, weighted graph implementation.

Implements the Graph interface using an adjacency-list representation:
each vertex owns an insertion-ordered list of outgoing Edge records.
"""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from dataclasses import dataclass, replace
from typing import Dict, Generic, List, Optional, Sequence

from graph import NO_EDGE, Graph, V
from graph_config import GraphConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge(Generic[V]):
    """
    Outgoing edge record. The source is the vertex whose list holds it.
    """
    target: V
    weight: int


def _require(label: object, name: str) -> None:
    if label is None:
        raise ValueError(f"{name} must not be None")


def _weight_allowed(source: object, target: object, weight: object) -> bool:
    """Weights are plain ints >= 0, and exactly 0 on a self-loop."""
    if not isinstance(weight, int) or isinstance(weight, bool):
        logger.debug(
            "Rejected edge %r -> %r: weight %r is not an int", source, target, weight
        )
        return False
    if weight < 0:
        logger.debug("Rejected edge %r -> %r: negative weight %d", source, target, weight)
        return False
    if source == target and weight != 0:
        logger.debug("Rejected self-loop on %r with weight %d", source, weight)
        return False
    return True


class AdjacencyListGraph(Graph[V]):
    """
    Directed, weighted graph backed by a vertex -> [Edge] mapping.

    Failures caused by the current graph state (duplicates, missing vertices
    or edges, bad weights) are reported through False / NO_EDGE returns.
    Passing None as a vertex label raises ValueError.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self._config = config if config is not None else GraphConfig()
        self._config.validate()
        self._adj: Dict[V, List[Edge[V]]] = {}
        self._lock = threading.RLock() if self._config.synchronized else nullcontext()

    @property
    def config(self) -> GraphConfig:
        return self._config

    # --- Vertices ------------------------------------------------------------

    def add_vertex(self, label: V) -> bool:
        """Insert label with no outgoing edges. False if already present."""
        _require(label, "label")
        with self._lock:
            if label in self._adj:
                logger.debug("Vertex %r already present", label)
                return False
            self._adj[label] = []
            return True

    def has_vertex(self, label: V) -> bool:
        _require(label, "label")
        with self._lock:
            return label in self._adj

    def vertices(self) -> List[V]:
        with self._lock:
            return list(self._adj)

    def remove_vertex(self, label: V) -> bool:
        """
        Remove label, its outgoing edges, and every edge pointing at it.

        There is no incoming-edge index, so this sweeps every outgoing list.
        """
        _require(label, "label")
        with self._lock:
            if label not in self._adj:
                return False
            for source, edges in self._adj.items():
                kept = [e for e in edges if e.target != label]
                if len(kept) != len(edges):
                    logger.debug(
                        "Dropped %d edge(s) %r -> %r", len(edges) - len(kept), source, label
                    )
                    edges[:] = kept
            del self._adj[label]
            logger.debug("Removed vertex %r", label)
            return True

    # --- Edges ---------------------------------------------------------------

    def add_edge(self, source: V, target: V, weight: int) -> bool:
        """
        Add a directed edge source -> target.

        Auto-adds vertices if they don't exist. Returns False, leaving the
        graph untouched, for a weight that is not a non-negative int, a
        self-loop with non-zero weight, or an already existing
        source -> target edge.
        """
        _require(source, "source")
        _require(target, "target")
        if not _weight_allowed(source, target, weight):
            return False

        with self._lock:
            if self._find(source, target) is not None:
                logger.debug("Edge %r -> %r already present", source, target)
                return False
            self._adj.setdefault(source, [])
            self._adj.setdefault(target, [])
            self._adj[source].append(Edge(target, weight))
            return True

    def edge_weight(self, source: V, target: V) -> int:
        _require(source, "source")
        _require(target, "target")
        with self._lock:
            if target not in self._adj:
                return NO_EDGE
            i = self._find(source, target)
            if i is None:
                return NO_EDGE
            return self._adj[source][i].weight

    def remove_edge(self, source: V, target: V) -> bool:
        _require(source, "source")
        _require(target, "target")
        with self._lock:
            if target not in self._adj:
                return False
            i = self._find(source, target)
            if i is None:
                return False
            del self._adj[source][i]
            return True

    def change_edge_weight(self, source: V, target: V, new_weight: int) -> bool:
        """
        Set the weight of an existing edge in place.

        The same weight rules as add_edge apply. Returns False if the edge
        does not exist.
        """
        _require(source, "source")
        _require(target, "target")
        if not _weight_allowed(source, target, new_weight):
            return False

        with self._lock:
            if source not in self._adj or target not in self._adj:
                return False
            edges = self._adj[source]
            found = False
            for i, e in enumerate(edges):
                if e.target == target:
                    edges[i] = replace(e, weight=new_weight)
                    found = True
            return found

    # --- Queries -------------------------------------------------------------

    def neighbors(self, label: V) -> Optional[List[V]]:
        _require(label, "label")
        with self._lock:
            edges = self._adj.get(label)
            if edges is None:
                return None
            return [e.target for e in edges]

    def outgoing(self, label: V) -> Dict[V, int]:
        _require(label, "label")
        with self._lock:
            return {e.target: e.weight for e in self._adj.get(label, [])}

    def predecessors(self, label: V) -> List[V]:
        """
        Vertices with an edge into label, in vertex insertion order.

        Unless config.full_predecessor_scan is set, the scan ends at the
        first contributing source, so at most one vertex is returned.
        label need not be a vertex; the result is then empty.
        """
        _require(label, "label")
        result: List[V] = []
        with self._lock:
            for source, edges in self._adj.items():
                if any(e.target == label for e in edges):
                    result.append(source)
                    if not self._config.full_predecessor_scan:
                        break
        return result

    def path_cost(self, path: Optional[Sequence[V]]) -> int:
        with self._lock:
            return super().path_cost(path)

    def describe(self) -> str:
        """One line per vertex: 'label -> (target, weight) ...'."""
        lines = []
        with self._lock:
            for label, edges in self._adj.items():
                pairs = "".join(f"({e.target}, {e.weight}) " for e in edges)
                lines.append(f"{label} -> {pairs}\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __len__(self) -> int:
        with self._lock:
            return len(self._adj)

    def __contains__(self, label: object) -> bool:
        # None and unhashable objects can never be vertices.
        if label is None:
            return False
        with self._lock:
            try:
                return label in self._adj
            except TypeError:
                return False

    # --- Internals -----------------------------------------------------------

    def _find(self, source: V, target: V) -> Optional[int]:
        """Index of the source -> target edge, or None."""
        for i, e in enumerate(self._adj.get(source, ())):
            if e.target == target:
                return i
        return None
