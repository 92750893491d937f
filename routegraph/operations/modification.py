"""
Network modification operations for route networks.

This module provides operations that modify network structure in place.
"""

import logging

from ..classes.edge import pyedge
from ..core.graph import RouteGraph

logger = logging.getLogger(__name__)


class GraphModifier:
    """
    Handles in-place network modification.

    This class provides methods for:
    - Fusing two vertices into one
    """

    def __init__(self, graph: RouteGraph):
        """
        Initialize the graph modifier.

        Args:
            graph: RouteGraph instance to modify
        """
        self.graph = graph

    def merge_vertices(self, i: int, j: int):
        """
        Fuse two vertices into the one with the smaller id.

        Edges of the larger vertex are moved onto the smaller one with their
        routes unchanged; edges joining the two vertices are dropped so no
        self-loop appears. A moved edge equal to one the smaller vertex already
        has is merged into it.

        Args:
            i: First vertex ID
            j: Second vertex ID
        """
        if i == j:
            return
        if not self.graph.has_vertex(i) or not self.graph.has_vertex(j):
            logger.warning(f"Cannot merge {i} and {j}: vertex not in graph")
            return

        lo, hi = min(i, j), max(i, j)

        for edge in self.graph.incident_edges(hi):
            other = edge.other_vertex(hi)
            self.graph.remove_edge(edge)
            if other != lo:
                self.graph.add_edge(pyedge(lo, other, edge.route))

        self.graph.remove_vertex(hi)
        logger.debug(f"Merged vertex {hi} into {lo}; degree of {lo} is now {self.graph.degree(lo)}")
