"""
Core multigraph data structure for route network representation.

This module provides the fundamental graph structure without high-level operations.
"""

import logging
from typing import Dict, Iterable, List, Set, Optional

import numpy as np

from ..classes.edge import pyedge
from ..exceptions import InvalidPreconditionError

logger = logging.getLogger(__name__)


class RouteGraph:
    """
    Core undirected multigraph for route networks.

    This class manages the fundamental graph representation without high-level
    operations like classification or path search. It provides:
    - Incidence sets keyed by caller-assigned vertex ids
    - Edge and vertex insertion/removal keeping both endpoint sets in sync
    - Degree and neighbourhood queries

    If the incidence set of u contains the edge {u, v}, the incidence set of v
    contains that same edge.
    """

    def __init__(self, edges: Optional[Iterable[pyedge]] = None):
        """
        Initialize the graph, optionally from a collection of edges.

        Args:
            edges: Edges to insert; duplicates (by edge equality) are kept once
        """
        self.incidence: Dict[int, Set[pyedge]] = {}

        if edges is not None:
            for edge in edges:
                self.add_edge(edge)
            logger.debug(f"Built graph with {self.vertex_count()} vertices and {self.edge_count()} edges")

    @classmethod
    def from_vertex_count(cls, n: int) -> 'RouteGraph':
        """Build a graph with vertices 0..n-1 and no edges."""
        graph = cls()
        for v in range(n):
            graph.incidence[v] = set()
        return graph

    @classmethod
    def from_edges(cls, edges: Iterable[pyedge]) -> 'RouteGraph':
        return cls(edges)

    def copy(self) -> 'RouteGraph':
        """
        Copy the adjacency structure.

        Edge values are immutable and shared; the incidence sets are not.
        """
        graph = RouteGraph()
        for v, edges in self.incidence.items():
            graph.incidence[v] = set(edges)
        return graph

    def induced_subgraph(self, vertices: Iterable[int]) -> 'RouteGraph':
        """
        Build the subgraph induced by a vertex set, leaving this graph untouched.

        Args:
            vertices: Vertex ids defining the subgraph, all present in this graph

        Returns:
            New graph holding every given vertex and every edge with both ends among them

        Raises:
            InvalidPreconditionError: If a vertex is not in this graph
        """
        kept = set(vertices)
        missing = kept - self.incidence.keys()
        if missing:
            logger.error(f"Cannot induce subgraph on absent vertices {sorted(missing)}")
            raise InvalidPreconditionError(f"vertices {sorted(missing)} are not in the graph")

        graph = RouteGraph()
        for v in kept:
            graph.incidence[v] = {edge for edge in self.incidence[v]
                                  if edge.i in kept and edge.j in kept}
        return graph

    # ========================================================================
    # VERTICES
    # ========================================================================

    def has_vertex(self, v: int) -> bool:
        return v in self.incidence

    def add_vertex(self, v: int):
        """Add a vertex if it is not already present."""
        if v not in self.incidence:
            self.incidence[v] = set()

    def remove_vertex(self, v: int):
        """
        Remove a vertex and every edge incident to it.

        Args:
            v: Vertex to remove; absent vertices are ignored
        """
        edges = self.incidence.pop(v, None)
        if edges is None:
            return
        for edge in edges:
            other = edge.other_vertex(v)
            if other in self.incidence:
                self.incidence[other].discard(edge)

    def vertices(self) -> Set[int]:
        return set(self.incidence.keys())

    def vertex_count(self) -> int:
        return len(self.incidence)

    # ========================================================================
    # EDGES
    # ========================================================================

    def add_edge(self, edge: pyedge):
        """
        Add an edge if it is not already present.

        Missing endpoints are added to the vertex set.

        Args:
            edge: Edge to insert

        Raises:
            InvalidPreconditionError: If the edge is a self-loop
        """
        if edge.is_self_loop():
            logger.error(f"Rejected self-loop edge {edge!r}")
            raise InvalidPreconditionError(f"self-loop edges are not allowed: {edge!r}")

        self.add_vertex(edge.i)
        self.add_vertex(edge.j)
        self.incidence[edge.i].add(edge)
        self.incidence[edge.j].add(edge)

    def remove_edge(self, edge: pyedge):
        """Remove an edge if it is present, otherwise do nothing."""
        if not self.has_edge(edge):
            return
        self.incidence[edge.i].discard(edge)
        self.incidence[edge.j].discard(edge)

    def has_edge(self, edge: pyedge) -> bool:
        edges = self.incidence.get(edge.i)
        return edges is not None and edge in edges

    def edges(self) -> Set[pyedge]:
        """Get every edge of the graph, parallel edges included."""
        result: Set[pyedge] = set()
        for edges in self.incidence.values():
            result.update(edges)
        return result

    def edge_count(self) -> int:
        """Number of edges; parallel edges are each counted."""
        return sum(len(edges) for edges in self.incidence.values()) // 2

    def incident_edges(self, v: int) -> List[pyedge]:
        """Get edges incident to v in a stable order (empty if v is absent)."""
        return sorted(self.incidence.get(v, ()), key=lambda edge: edge.sort_key())

    # ========================================================================
    # NEIGHBOURHOOD & DEGREES
    # ========================================================================

    def degree(self, v: int) -> int:
        """Number of incident edges, 0 if v is absent."""
        return len(self.incidence.get(v, ()))

    def max_degree(self) -> int:
        if not self.incidence:
            return 0
        return max(len(edges) for edges in self.incidence.values())

    def neighbors(self, v: int) -> Set[int]:
        return {edge.other_vertex(v) for edge in self.incidence.get(v, ())}

    def neighbors_with_edge(self, v: int) -> Dict[int, pyedge]:
        """
        Map each neighbour of v to one edge joining them.

        When several parallel edges lead to the same neighbour only the last one
        in stable edge order is kept; use incident_edges for multiplicity.
        """
        result: Dict[int, pyedge] = {}
        for edge in self.incident_edges(v):
            result[edge.other_vertex(v)] = edge
        return result

    def degree_sequence(self) -> List[int]:
        """Vertex degrees sorted in ascending order."""
        degrees = np.array([len(edges) for edges in self.incidence.values()], dtype=int)
        return np.sort(degrees).tolist()

    def to_adjacency_matrix(self) -> np.ndarray:
        """
        Build the edge multiplicity matrix.

        Rows and columns follow the ascending order of vertex ids; entry
        (a, b) counts the edges joining the a-th and b-th vertices.
        """
        order = sorted(self.incidence)
        index = {v: k for k, v in enumerate(order)}
        matrix = np.zeros((len(order), len(order)), dtype=int)
        for edge in self.edges():
            a, b = index[edge.i], index[edge.j]
            matrix[a, b] += 1
            if a != b:
                matrix[b, a] += 1
        return matrix

    def __len__(self) -> int:
        return len(self.incidence)

    def __contains__(self, v: object) -> bool:
        return v in self.incidence

    def __str__(self) -> str:
        lines = []
        for v in sorted(self.incidence):
            edges = ", ".join(str(edge) for edge in self.incident_edges(v))
            lines.append(f"vertex {v} : [{edges}]")
        return "\n".join(lines)
