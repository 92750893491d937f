"""
Path finding and cut analysis for route networks.

This module provides algorithms for finding paths under resource constraints.

The exhaustive searches (shortest_simple_path, constrained_path,
multi_stop_path) enumerate every simple path and are exponential in the worst
case; they rely on board-sized inputs. Each search frame carries its own
visited set so sibling branches never share state.
"""

import heapq
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple
from collections import deque

from ..classes.edge import pyedge
from ..classes.route import RouteCategory
from ..core.graph import RouteGraph
from ..exceptions import InvalidPreconditionError

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Path finding algorithms for route networks.

    This class provides methods for:
    - Finding the shortest path without repeated vertices (exhaustive)
    - Finding paths within separate wagon and boat budgets
    - Chaining constrained paths through ordered waypoints
    - Dijkstra shortest paths
    - Finding a minimum set of edges separating two vertices
    """

    def __init__(self, graph: RouteGraph):
        """
        Initialize the path finder.

        Args:
            graph: RouteGraph instance to search
        """
        self.graph = graph

    def _cheapest_steps(self, v: int, weighted: bool) -> List[Tuple[int, int]]:
        """
        List (neighbour, cost) pairs in ascending neighbour order.

        The cost is the shortest parallel edge length when weighted, else 1.
        """
        steps: Dict[int, int] = {}
        for edge in self.graph.incident_edges(v):
            neighbor_id = edge.other_vertex(v)
            cost = edge.length if weighted else 1
            if neighbor_id not in steps or cost < steps[neighbor_id]:
                steps[neighbor_id] = cost
        return sorted(steps.items())

    def _route_options(self, v: int) -> List[Tuple[int, RouteCategory, int]]:
        """
        List (neighbour, category, length) moves out of v.

        Parallel edges of the same category are reduced to the shortest one;
        a longer edge in the same pool can never give a cheaper path.
        """
        options: Dict[Tuple[int, RouteCategory], int] = {}
        for edge in self.graph.incident_edges(v):
            key = (edge.other_vertex(v), edge.category)
            if key not in options or edge.length < options[key]:
                options[key] = edge.length
        return sorted(((neighbor_id, category, length) for (neighbor_id, category), length in options.items()),
                      key=lambda option: (option[0], option[2], option[1].value))

    # ========================================================================
    # EXHAUSTIVE SIMPLE PATHS
    # ========================================================================

    def shortest_simple_path(self, start_id: int, target_id: int, weighted: bool = False) -> List[int]:
        """
        Find the cheapest path without repeated vertices by exhaustive DFS.

        Args:
            start_id: Starting vertex ID
            target_id: Target vertex ID
            weighted: Sum route lengths if True, count edges otherwise

        Returns:
            List of vertex IDs from start to target, empty if no path exists
        """
        if not self.graph.has_vertex(start_id) or not self.graph.has_vertex(target_id):
            return []
        if start_id == target_id:
            return [start_id]

        best_path: Optional[Tuple[int, ...]] = None
        best_cost = 0
        stack = [(start_id, (start_id,), frozenset([start_id]), 0)]

        while stack:
            current_id, path, visited, cost = stack.pop()
            if best_path is not None and cost >= best_cost:
                continue
            if current_id == target_id:
                best_path, best_cost = path, cost
                continue

            # Reversed so the lowest neighbour is expanded first
            for neighbor_id, step in reversed(self._cheapest_steps(current_id, weighted)):
                if neighbor_id not in visited:
                    stack.append((neighbor_id, path + (neighbor_id,), visited | {neighbor_id}, cost + step))

        if best_path is None:
            logger.debug(f"No path between {start_id} and {target_id}")
            return []
        return list(best_path)

    # ========================================================================
    # CONSTRAINED PATHS
    # ========================================================================

    def _constrained_search(self, start_id: int, target_id: int, wagon_budget: int, boat_budget: int,
                            forbidden: Iterable[int] = ()) -> Optional[Tuple[List[int], int, int]]:
        """
        Core constrained search.

        Returns:
            Tuple of (path, wagons_used, boats_used), or None if infeasible
        """
        blocked = frozenset(forbidden)
        if not self.graph.has_vertex(start_id) or not self.graph.has_vertex(target_id):
            return None
        if start_id in blocked or target_id in blocked:
            return None
        if start_id == target_id:
            return [start_id], 0, 0

        best: Optional[Tuple[Tuple[int, ...], int, int]] = None
        stack = [(start_id, (start_id,), blocked | {start_id}, 0, 0)]

        while stack:
            current_id, path, visited, wagons, boats = stack.pop()
            if best is not None and wagons + boats >= best[1] + best[2]:
                continue
            if current_id == target_id:
                best = (path, wagons, boats)
                continue

            for neighbor_id, category, length in reversed(self._route_options(current_id)):
                if neighbor_id in visited:
                    continue
                if category == RouteCategory.SEA:
                    next_wagons, next_boats = wagons, boats + length
                else:
                    next_wagons, next_boats = wagons + length, boats
                if next_wagons > wagon_budget or next_boats > boat_budget:
                    continue
                stack.append((neighbor_id, path + (neighbor_id,), visited | {neighbor_id},
                              next_wagons, next_boats))

        if best is None:
            return None
        path, wagons, boats = best
        return list(path), wagons, boats

    @staticmethod
    def _check_budgets(wagon_budget: int, boat_budget: int):
        if wagon_budget < 0 or boat_budget < 0:
            logger.error(f"Negative budget: wagons={wagon_budget}, boats={boat_budget}")
            raise InvalidPreconditionError("budgets must be non-negative")

    def constrained_path(self, start_id: int, target_id: int, wagon_budget: int, boat_budget: int,
                         forbidden: Iterable[int] = ()) -> List[int]:
        """
        Find the least consuming path that fits both transport budgets.

        Land routes consume their length in wagons, sea routes in boats.

        Args:
            start_id: Starting vertex ID
            target_id: Target vertex ID
            wagon_budget: Wagons available for land routes
            boat_budget: Boats available for sea routes
            forbidden: Vertex IDs the path must not enter

        Returns:
            List of vertex IDs from start to target, empty if infeasible

        Raises:
            InvalidPreconditionError: If a budget is negative
        """
        self._check_budgets(wagon_budget, boat_budget)
        result = self._constrained_search(start_id, target_id, wagon_budget, boat_budget, forbidden)
        if result is None:
            logger.debug(f"No path between {start_id} and {target_id} within "
                         f"{wagon_budget} wagons and {boat_budget} boats")
            return []
        return result[0]

    def multi_stop_path(self, waypoints: Sequence[int], wagon_budget: int, boat_budget: int) -> List[int]:
        """
        Chain constrained paths through waypoints, in order.

        Each leg avoids the vertices already used and the waypoints still ahead,
        and spends from what is left of the budgets.

        Args:
            waypoints: Vertex IDs to visit in order
            wagon_budget: Wagons available for land routes
            boat_budget: Boats available for sea routes

        Returns:
            Path through every waypoint without repeated vertices, empty if
            any leg is infeasible

        Raises:
            InvalidPreconditionError: If a budget is negative
        """
        self._check_budgets(wagon_budget, boat_budget)
        if not waypoints:
            return []
        if len(set(waypoints)) != len(waypoints):
            logger.debug(f"Repeated waypoint in {list(waypoints)}")
            return []
        if not all(self.graph.has_vertex(w) for w in waypoints):
            return []

        path = [waypoints[0]]
        wagons_left, boats_left = wagon_budget, boat_budget

        for k in range(len(waypoints) - 1):
            forbidden = set(path[:-1]) | set(waypoints[k + 2:])
            result = self._constrained_search(waypoints[k], waypoints[k + 1], wagons_left, boats_left, forbidden)
            if result is None:
                logger.debug(f"Leg {waypoints[k]} -> {waypoints[k + 1]} is infeasible")
                return []
            leg, wagons, boats = result
            wagons_left -= wagons
            boats_left -= boats
            path.extend(leg[1:])

        return path

    # ========================================================================
    # POLYNOMIAL ALGORITHMS
    # ========================================================================

    def dijkstra(self, start_id: int, target_id: int, weighted: bool = True) -> List[int]:
        """
        Find a shortest path with Dijkstra's algorithm.

        Args:
            start_id: Starting vertex ID
            target_id: Target vertex ID
            weighted: Use route lengths if True, unit weights otherwise

        Returns:
            List of vertex IDs from start to target, empty if unreachable
        """
        if not self.graph.has_vertex(start_id) or not self.graph.has_vertex(target_id):
            return []

        dist: Dict[int, int] = {start_id: 0}
        prev: Dict[int, int] = {}
        seen: Set[int] = set()
        pq = [(0, start_id)]

        while pq:
            d, u = heapq.heappop(pq)
            if u in seen:
                continue
            seen.add(u)
            if u == target_id:
                break
            for v, w in self._cheapest_steps(u, weighted):
                nd = d + w
                if nd < dist.get(v, float("inf")):
                    dist[v] = nd
                    prev[v] = u
                    heapq.heappush(pq, (nd, v))

        if target_id not in dist:
            return []

        # reconstruct
        path = [target_id]
        while path[-1] != start_id:
            path.append(prev[path[-1]])
        path.reverse()
        return path

    def path_length(self, path: Sequence[int], weighted: bool = True) -> int:
        """
        Sum the cost of a vertex path, using the shortest parallel edge per hop.

        Raises:
            InvalidPreconditionError: If two consecutive vertices are not adjacent
        """
        total = 0
        for u, v in zip(path, path[1:]):
            steps = dict(self._cheapest_steps(u, weighted))
            if v not in steps:
                logger.error(f"Vertices {u} and {v} are not adjacent")
                raise InvalidPreconditionError(f"no edge between {u} and {v}")
            total += steps[v]
        return total

    def min_blocking_edge_set(self, source_id: int, sink_id: int) -> Set[pyedge]:
        """
        Find a minimum number of edges whose removal separates two vertices.

        Every edge has capacity one in both directions; augmenting paths are
        found by BFS (Edmonds-Karp). Once no augmenting path remains, the edges
        leaving the residual-reachable side of the source form the cut.

        Args:
            source_id: First vertex ID
            sink_id: Second vertex ID

        Returns:
            Set of edges of minimum cardinality, empty if the vertices are equal,
            absent, or already disconnected
        """
        if source_id == sink_id:
            return set()
        if not self.graph.has_vertex(source_id) or not self.graph.has_vertex(sink_id):
            return set()

        # +1 when one unit flows from edge.i to edge.j, -1 for the reverse
        flow: Dict[pyedge, int] = {}

        def residual(edge: pyedge, from_id: int) -> int:
            f = flow.get(edge, 0)
            return 1 - f if from_id == edge.i else 1 + f

        while True:
            parent: Dict[int, Optional[Tuple[int, pyedge]]] = {source_id: None}
            queue = deque([source_id])
            while queue and sink_id not in parent:
                current_id = queue.popleft()
                for edge in self.graph.incident_edges(current_id):
                    neighbor_id = edge.other_vertex(current_id)
                    if neighbor_id not in parent and residual(edge, current_id) > 0:
                        parent[neighbor_id] = (current_id, edge)
                        queue.append(neighbor_id)

            if sink_id not in parent:
                break

            v = sink_id
            while v != source_id:
                u, edge = parent[v]
                flow[edge] = flow.get(edge, 0) + (1 if u == edge.i else -1)
                v = u

        reachable = set(parent)
        cut = {edge for edge in self.graph.edges() if (edge.i in reachable) != (edge.j in reachable)}
        logger.debug(f"Minimum blocking set between {source_id} and {sink_id} has {len(cut)} edges")
        return cut
