"""
Edge representation for the route multigraph.
"""

from typing import Any, Optional, Tuple

from .route import RouteCategory

# Used for edges that carry no route
DEFAULT_EDGE_LENGTH = 1
DEFAULT_EDGE_CATEGORY = RouteCategory.LAND


class pyedge:
    """
    Undirected edge between two vertex ids, optionally carrying a route.

    Two edges are equal when their unordered endpoint pairs match and their
    routes are equal (two missing routes are equal). Edges with the same
    endpoints but different routes are therefore parallel, distinct edges.

    The endpoints are expected to differ; the graph rejects self-loops when
    the edge is inserted.
    """

    __slots__ = ('_i', '_j', '_route')

    def __init__(self, i: int, j: int, route: Optional[Any] = None):
        self._i = i
        self._j = j
        self._route = route

    @property
    def i(self) -> int:
        return self._i

    @property
    def j(self) -> int:
        return self._j

    @property
    def route(self) -> Optional[Any]:
        return self._route

    @property
    def endpoints(self) -> Tuple[int, int]:
        """Endpoints as an ordered (low, high) pair."""
        return (self._i, self._j) if self._i <= self._j else (self._j, self._i)

    @property
    def length(self) -> int:
        """Edge weight: the route length, or DEFAULT_EDGE_LENGTH without a route."""
        if self._route is None:
            return DEFAULT_EDGE_LENGTH
        return self._route.length

    @property
    def category(self) -> RouteCategory:
        if self._route is None:
            return DEFAULT_EDGE_CATEGORY
        return RouteCategory.coerce(self._route.category)

    def is_self_loop(self) -> bool:
        return self._i == self._j

    def is_incident_to(self, v: int) -> bool:
        return self._i == v or self._j == v

    def other_vertex(self, v: int) -> int:
        """
        Get the endpoint opposite to v.

        Args:
            v: One endpoint of this edge

        Returns:
            The other endpoint
        """
        return self._j if v == self._i else self._i

    def sort_key(self) -> Tuple:
        """Key giving a stable order over edges, parallel edges included."""
        route_key = "" if self._route is None else str(self._route)
        return self.endpoints + (self.length, self.category.value, route_key)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, pyedge):
            return NotImplemented
        return self.endpoints == other.endpoints and self._route == other._route

    def __hash__(self) -> int:
        return hash((self.endpoints, self._route))

    def __repr__(self) -> str:
        if self._route is None:
            return f"pyedge({self._i}, {self._j})"
        return f"pyedge({self._i}, {self._j}, {self._route!r})"

    def __str__(self) -> str:
        if self._route is None:
            return f"{{{self._i}, {self._j}}}"
        return f"{{{self._i}, {self._j}}}[{self._route}]"
