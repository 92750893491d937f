"""
PyRoutegraph - Route Network Multigraph Library

A Python library for analyzing board-game route networks as weighted,
undirected multigraphs. Handles parallel routes between the same cities,
land and sea transport pools, and small exhaustive searches.

Main Classes:
    pyroutegraph: Main class for route network analysis (facade)
    RouteGraph: Core incidence structure
    pyedge: Edge representation between vertices
    pyroute: Route payload carried by an edge
    RouteCategory: Land or sea transport pool

Example:
    >>> from routegraph import pyroutegraph, pyedge
    >>> graph = pyroutegraph([pyedge(0, 1), pyedge(1, 2)])
    >>> graph.is_chain()
    True
"""

__version__ = "0.1.0"

from routegraph.classes.route import pyroute, RouteCategory
from routegraph.classes.edge import pyedge
from routegraph.core.graph import RouteGraph
from routegraph.core.routegraph import pyroutegraph
from routegraph.exceptions import RouteGraphError, InvalidPreconditionError

__all__ = [
    'pyroutegraph',
    'RouteGraph',
    'pyedge',
    'pyroute',
    'RouteCategory',
    'RouteGraphError',
    'InvalidPreconditionError',
]
