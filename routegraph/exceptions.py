"""
Exceptions raised by routegraph.

Queries on absent vertices or edges never raise; they return empty or zero
results. Only caller precondition violations are signalled.
"""


class RouteGraphError(Exception):
    """Base class for all routegraph errors."""


class InvalidPreconditionError(RouteGraphError, ValueError):
    """
    Raised when a caller breaks a documented precondition.

    Examples: a self-loop edge, an induced-subgraph vertex set that is not
    contained in the graph, a degree sequence with a negative entry.
    """
