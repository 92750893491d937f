"""
Connectivity analysis and structural classification for route networks.

This module provides algorithms for detecting connected classes, chains,
cycles, trees, forests and isthmuses in a multigraph.
"""

import logging
from typing import List, Set
from collections import deque

import numpy as np

from ..classes.edge import pyedge
from ..core.graph import RouteGraph

logger = logging.getLogger(__name__)


class ConnectivityAnalyzer:
    """
    Classifies the structure of a route multigraph.

    This class provides methods for:
    - Finding connected classes
    - Detecting simple, complete, chain and cycle graphs
    - Detecting acyclic graphs, trees and forests
    - Detecting isthmuses (bridges)

    Parallel edges are taken into account everywhere: two vertices joined by
    two edges form neither a chain nor a cycle.
    """

    def __init__(self, graph: RouteGraph):
        """
        Initialize the connectivity analyzer.

        Args:
            graph: RouteGraph instance to analyze
        """
        self.graph = graph

    # ========================================================================
    # CONNECTED CLASSES
    # ========================================================================

    def connected_class(self, v: int) -> Set[int]:
        """
        Find every vertex reachable from v using BFS.

        Args:
            v: Seed vertex

        Returns:
            Set of reachable vertex ids including v, empty if v is absent
        """
        if not self.graph.has_vertex(v):
            return set()

        reached = {v}
        queue = deque([v])
        while queue:
            current_id = queue.popleft()
            for neighbor_id in self.graph.neighbors(current_id):
                if neighbor_id not in reached:
                    reached.add(neighbor_id)
                    queue.append(neighbor_id)

        return reached

    def all_connected_classes(self) -> List[Set[int]]:
        """
        Partition the vertices into connected classes.

        Returns:
            Disjoint classes covering every vertex, ordered by smallest vertex id
        """
        classes = []
        classified: Set[int] = set()

        for v in sorted(self.graph.vertices()):
            if v in classified:
                continue
            component = self.connected_class(v)
            classified.update(component)
            classes.append(component)

        logger.debug(f"Found {len(classes)} connected classes")
        return classes

    def component_count(self) -> int:
        return len(self.all_connected_classes())

    def is_connected(self) -> bool:
        if self.graph.vertex_count() <= 1:
            return True
        seed = min(self.graph.vertices())
        return len(self.connected_class(seed)) == self.graph.vertex_count()

    def are_adjacent(self, u: int, v: int) -> bool:
        return v in self.graph.neighbors(u)

    # ========================================================================
    # CLASSIFIERS
    # ========================================================================

    def is_simple(self) -> bool:
        """True iff there is no self-loop and no pair of parallel edges."""
        for v, edges in self.graph.incidence.items():
            neighbors = set()
            for edge in edges:
                if edge.is_self_loop():
                    return False
                other = edge.other_vertex(v)
                if other in neighbors:
                    return False
                neighbors.add(other)
        return True

    def is_complete(self) -> bool:
        """True iff every pair of distinct vertices is joined by an edge."""
        matrix = self.graph.to_adjacency_matrix()
        joined = matrix > 0
        np.fill_diagonal(joined, True)
        return bool(joined.all())

    def _count_vertices_of_degree(self, degree: int) -> int:
        return sum(1 for v in self.graph.incidence if self.graph.degree(v) == degree)

    def is_chain(self) -> bool:
        """
        Check whether the graph is a chain (an elementary path).

        The empty graph and a single vertex are chains. Successive vertices must
        be joined by exactly one edge.
        """
        if self.graph.max_degree() > 2:
            return False
        if self.graph.vertex_count() >= 2 and self._count_vertices_of_degree(1) != 2:
            return False
        return self.is_connected() and self.is_simple()

    def is_cycle(self) -> bool:
        """
        Check whether the graph is an elementary cycle.

        The empty graph is a cycle. Two vertices joined by two parallel edges
        are not.
        """
        if self._count_vertices_of_degree(2) != self.graph.vertex_count():
            return False
        return self.is_connected() and self.is_simple()

    def is_acyclic(self) -> bool:
        """True iff every connected class holds exactly |class| - 1 edges."""
        for component in self.all_connected_classes():
            degree_sum = sum(self.graph.degree(v) for v in component)
            if degree_sum // 2 != len(component) - 1:
                return False
        return True

    def is_tree(self) -> bool:
        return self.is_connected() and self.is_acyclic()

    def is_forest(self) -> bool:
        """True iff every connected class, taken in isolation, is a tree."""
        for component in self.all_connected_classes():
            subgraph = self.graph.induced_subgraph(component)
            if not ConnectivityAnalyzer(subgraph).is_tree():
                return False
        return True

    def is_isthmus(self, edge: pyedge) -> bool:
        """
        Check whether removing an edge disconnects its endpoints.

        The removal happens on a copy; the analysed graph is left untouched.

        Args:
            edge: Edge to test

        Returns:
            True if the edge is an isthmus, False otherwise or if it is absent
        """
        if not self.graph.has_edge(edge):
            return False

        scratch = self.graph.copy()
        scratch.remove_edge(edge)
        return edge.j not in ConnectivityAnalyzer(scratch).connected_class(edge.i)
