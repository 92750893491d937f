"""
Main facade class for route network analysis.

This module provides the pyroutegraph class that exposes the whole public API
while delegating to specialized modules.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set

import numpy as np

from ..classes.edge import pyedge
from .graph import RouteGraph
from ..operations.modification import GraphModifier
from ..analysis.connectivity import ConnectivityAnalyzer
from ..analysis.pathfinding import PathFinder
from ..analysis import isomorphism

logger = logging.getLogger(__name__)


class pyroutegraph:
    """
    Main facade class for route network analysis.

    Owns a RouteGraph (an undirected multigraph whose edges carry routes) and
    delegates classification, fusion, isomorphism and path search to the
    specialized modules. All components share the same graph instance, so
    mutations are seen by every later query.

    The incidence attribute exposes the live incidence sets for inspection
    only; modifying it directly breaks the symmetric incidence invariant.
    """

    def __init__(self, edges: Optional[Iterable[pyedge]] = None, graph: Optional[RouteGraph] = None):
        """
        Initialize the route network graph.

        Args:
            edges: Optional edges to build the graph from (deduplicated)
            graph: Optional existing RouteGraph to wrap instead
        """
        self._graph = graph if graph is not None else RouteGraph(edges)

        # Initialize analysis components
        self._connectivity = ConnectivityAnalyzer(self._graph)
        self._pathfinder = PathFinder(self._graph)

        # Initialize operation components
        self._modifier = GraphModifier(self._graph)

        # Live view of the incidence sets; read-only, mutate through add_edge/remove_edge
        self.incidence = self._graph.incidence

    @classmethod
    def from_vertex_count(cls, n: int) -> 'pyroutegraph':
        """Build a graph with vertices 0..n-1 and no edges."""
        return cls(graph=RouteGraph.from_vertex_count(n))

    @classmethod
    def from_edges(cls, edges: Iterable[pyedge]) -> 'pyroutegraph':
        return cls(edges)

    @property
    def graph(self) -> RouteGraph:
        return self._graph

    def copy(self) -> 'pyroutegraph':
        return pyroutegraph(graph=self._graph.copy())

    def induced_subgraph(self, vertices: Iterable[int]) -> 'pyroutegraph':
        """Build the subgraph induced by a subset of the vertices."""
        return pyroutegraph(graph=self._graph.induced_subgraph(vertices))

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def has_vertex(self, v: int) -> bool:
        return self._graph.has_vertex(v)

    def add_vertex(self, v: int):
        self._graph.add_vertex(v)

    def remove_vertex(self, v: int):
        self._graph.remove_vertex(v)

    def add_edge(self, edge: pyedge):
        self._graph.add_edge(edge)

    def remove_edge(self, edge: pyedge):
        self._graph.remove_edge(edge)

    def has_edge(self, edge: pyedge) -> bool:
        return self._graph.has_edge(edge)

    def vertices(self) -> Set[int]:
        return self._graph.vertices()

    def edges(self) -> Set[pyedge]:
        return self._graph.edges()

    def incident_edges(self, v: int) -> List[pyedge]:
        return self._graph.incident_edges(v)

    def vertex_count(self) -> int:
        return self._graph.vertex_count()

    def edge_count(self) -> int:
        return self._graph.edge_count()

    def degree(self, v: int) -> int:
        return self._graph.degree(v)

    def max_degree(self) -> int:
        return self._graph.max_degree()

    def degree_sequence(self) -> List[int]:
        return self._graph.degree_sequence()

    def neighbors(self, v: int) -> Set[int]:
        return self._graph.neighbors(v)

    def neighbors_with_edge(self, v: int) -> Dict[int, pyedge]:
        return self._graph.neighbors_with_edge(v)

    def to_adjacency_matrix(self) -> np.ndarray:
        return self._graph.to_adjacency_matrix()

    # ========================================================================
    # STRUCTURAL CLASSIFICATION
    # ========================================================================

    def is_simple(self) -> bool:
        return self._connectivity.is_simple()

    def is_complete(self) -> bool:
        return self._connectivity.is_complete()

    def is_connected(self) -> bool:
        return self._connectivity.is_connected()

    def is_chain(self) -> bool:
        return self._connectivity.is_chain()

    def is_cycle(self) -> bool:
        return self._connectivity.is_cycle()

    def is_acyclic(self) -> bool:
        return self._connectivity.is_acyclic()

    def is_tree(self) -> bool:
        return self._connectivity.is_tree()

    def is_forest(self) -> bool:
        return self._connectivity.is_forest()

    def is_isthmus(self, edge: pyedge) -> bool:
        return self._connectivity.is_isthmus(edge)

    def are_adjacent(self, u: int, v: int) -> bool:
        return self._connectivity.are_adjacent(u, v)

    def connected_class(self, v: int) -> Set[int]:
        return self._connectivity.connected_class(v)

    def all_connected_classes(self) -> List[Set[int]]:
        return self._connectivity.all_connected_classes()

    def component_count(self) -> int:
        return self._connectivity.component_count()

    # ========================================================================
    # NETWORK MODIFICATION
    # ========================================================================

    def merge_vertices(self, i: int, j: int):
        """Fuse vertices i and j into min(i, j)."""
        self._modifier.merge_vertices(i, j)

    # ========================================================================
    # DEGREE SEQUENCES & ISOMORPHISM
    # ========================================================================

    @staticmethod
    def is_graphic_sequence(sequence: Sequence[int]) -> bool:
        return isomorphism.is_graphic_sequence(sequence)

    @staticmethod
    def are_isomorphic(g1: 'pyroutegraph', g2: 'pyroutegraph') -> bool:
        """Exhaustive isomorphism test; only suited to small graphs."""
        return isomorphism.are_isomorphic(g1.graph, g2.graph)

    # ========================================================================
    # PATH FINDING
    # ========================================================================

    def shortest_simple_path(self, start_id: int, target_id: int, weighted: bool = False) -> List[int]:
        return self._pathfinder.shortest_simple_path(start_id, target_id, weighted)

    def constrained_path(self, start_id: int, target_id: int, wagon_budget: int, boat_budget: int,
                         forbidden: Iterable[int] = ()) -> List[int]:
        return self._pathfinder.constrained_path(start_id, target_id, wagon_budget, boat_budget, forbidden)

    def multi_stop_path(self, waypoints: Sequence[int], wagon_budget: int, boat_budget: int) -> List[int]:
        return self._pathfinder.multi_stop_path(waypoints, wagon_budget, boat_budget)

    def dijkstra(self, start_id: int, target_id: int, weighted: bool = True) -> List[int]:
        return self._pathfinder.dijkstra(start_id, target_id, weighted)

    def path_length(self, path: Sequence[int], weighted: bool = True) -> int:
        return self._pathfinder.path_length(path, weighted)

    def min_blocking_edge_set(self, source_id: int, sink_id: int) -> Set[pyedge]:
        return self._pathfinder.min_blocking_edge_set(source_id, sink_id)

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, v: object) -> bool:
        return v in self._graph

    def __str__(self) -> str:
        return str(self._graph)
