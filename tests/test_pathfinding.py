"""
Tests for path finding under length and transport constraints.
"""

from collections import namedtuple

import pytest

from routegraph import InvalidPreconditionError, RouteCategory, pyedge, pyroute, pyroutegraph

LAND = RouteCategory.LAND
SEA = RouteCategory.SEA


@pytest.fixture
def board() -> pyroutegraph:
    """
    Small map with a land/sea parallel pair between 1 and 2.

        0 --L2-- 1 ==L2/S1== 2 --S3-- 4 --L1-- 5
        |                    |
        L1                   L4
        |                    |
        3 -------------------+
    """
    return pyroutegraph([
        pyedge(0, 1, pyroute("L01", 2, LAND)),
        pyedge(1, 2, pyroute("L12", 2, LAND)),
        pyedge(1, 2, pyroute("S12", 1, SEA)),
        pyedge(0, 3, pyroute("L03", 1, LAND)),
        pyedge(3, 2, pyroute("L32", 4, LAND)),
        pyedge(2, 4, pyroute("S24", 3, SEA)),
        pyedge(4, 5, pyroute("L45", 1, LAND)),
    ])


@pytest.fixture
def detour() -> pyroutegraph:
    """Direct long route 0-2 and a shorter two-hop detour through 1."""
    return pyroutegraph([
        pyedge(0, 2, pyroute("long", 10)),
        pyedge(0, 1, pyroute("a", 2)),
        pyedge(1, 2, pyroute("b", 3)),
    ])


class TestShortestSimplePath:

    def test_unweighted_counts_edges(self, detour):
        assert detour.shortest_simple_path(0, 2) == [0, 2]

    def test_weighted_sums_lengths(self, detour):
        assert detour.shortest_simple_path(0, 2, weighted=True) == [0, 1, 2]

    def test_tie_goes_to_lowest_neighbour(self, board):
        assert board.shortest_simple_path(0, 2) == [0, 1, 2]

    def test_weighted_uses_shortest_parallel_edge(self, board):
        path = board.shortest_simple_path(0, 2, weighted=True)
        assert path == [0, 1, 2]
        assert board.path_length(path) == 3

    def test_no_path(self, sample_graph):
        assert sample_graph.shortest_simple_path(0, 42) == []
        assert sample_graph.shortest_simple_path(0, 99) == []

    def test_same_vertex(self, sample_graph):
        assert sample_graph.shortest_simple_path(2, 2) == [2]

    def test_graph_is_unchanged(self, board):
        before = board.edges()
        board.shortest_simple_path(0, 5, weighted=True)
        assert board.edges() == before


class TestConstrainedPath:

    def test_edge_over_budget_blocks_path(self):
        graph = pyroutegraph([pyedge(0, 1, pyroute("L", 3, LAND))])
        assert graph.shortest_simple_path(0, 1) == [0, 1]
        assert graph.constrained_path(0, 1, wagon_budget=2, boat_budget=10) == []
        assert graph.constrained_path(0, 1, wagon_budget=3, boat_budget=0) == [0, 1]

    def test_sea_route_uses_boat_budget(self):
        graph = pyroutegraph([pyedge(0, 1, pyroute("S", 3, SEA))])
        assert graph.constrained_path(0, 1, wagon_budget=10, boat_budget=2) == []
        assert graph.constrained_path(0, 1, wagon_budget=0, boat_budget=3) == [0, 1]

    def test_parallel_sea_route_saves_wagons(self, board):
        assert board.constrained_path(0, 2, wagon_budget=3, boat_budget=1) == [0, 1, 2]
        assert board.constrained_path(0, 2, wagon_budget=3, boat_budget=0) == []
        assert board.constrained_path(0, 2, wagon_budget=4, boat_budget=0) == [0, 1, 2]

    def test_least_total_consumption_wins(self):
        graph = pyroutegraph([
            pyedge(0, 5, pyroute("direct", 6, LAND)),
            pyedge(0, 1, pyroute("hop", 1, LAND)),
            pyedge(1, 5, pyroute("ferry", 1, SEA)),
        ])
        assert graph.constrained_path(0, 5, wagon_budget=10, boat_budget=10) == [0, 1, 5]
        assert graph.constrained_path(0, 5, wagon_budget=10, boat_budget=0) == [0, 5]

    def test_forbidden_vertices_are_avoided(self, board):
        assert board.constrained_path(0, 2, 10, 10, forbidden={1}) == [0, 3, 2]
        assert board.constrained_path(0, 2, 10, 10, forbidden={1, 3}) == []

    def test_plain_tuple_routes(self):
        """Any payload with length and category works, categories given as strings."""
        Route = namedtuple("Route", ["name", "length", "category"])
        graph = pyroutegraph([
            pyedge(0, 1, Route("ferry", 2, "sea")),
            pyedge(1, 2, Route("road", 1, "LAND")),
        ])
        assert graph.neighbors_with_edge(1) == {0: pyedge(0, 1, Route("ferry", 2, "sea")),
                                                2: pyedge(1, 2, Route("road", 1, "LAND"))}
        assert graph.constrained_path(0, 1, wagon_budget=0, boat_budget=5) == [0, 1]
        assert graph.constrained_path(0, 1, wagon_budget=5, boat_budget=1) == []
        assert graph.constrained_path(0, 2, wagon_budget=1, boat_budget=2) == [0, 1, 2]

    def test_negative_budget_is_rejected(self, board):
        with pytest.raises(InvalidPreconditionError):
            board.constrained_path(0, 2, -1, 5)


class TestMultiStopPath:

    def test_waypoints_in_order(self, build):
        square = build((0, 1), (1, 2), (2, 3), (3, 0))
        assert square.multi_stop_path([0, 2, 3], wagon_budget=3, boat_budget=0) == [0, 1, 2, 3]

    def test_budget_is_shared_between_legs(self, build):
        square = build((0, 1), (1, 2), (2, 3), (3, 0))
        assert square.multi_stop_path([0, 2, 3], wagon_budget=2, boat_budget=0) == []

    def test_leg_cannot_reuse_vertices(self, build):
        star = build((0, 3), (3, 1), (3, 2))
        assert star.shortest_simple_path(1, 2) == [1, 3, 2]
        assert star.multi_stop_path([0, 1, 2], wagon_budget=10, boat_budget=10) == []

    def test_result_has_no_repeated_vertex(self, board):
        path = board.multi_stop_path([0, 2, 5], wagon_budget=10, boat_budget=10)
        assert path == [0, 1, 2, 4, 5]
        assert len(set(path)) == len(path)

    def test_degenerate_waypoints(self, board):
        assert board.multi_stop_path([], 5, 5) == []
        assert board.multi_stop_path([3], 5, 5) == [3]
        assert board.multi_stop_path([0, 1, 0], 5, 5) == []
        assert board.multi_stop_path([0, 99], 5, 5) == []


class TestDijkstra:

    def test_weighted(self, detour):
        assert detour.dijkstra(0, 2) == [0, 1, 2]

    def test_unweighted(self, detour):
        assert detour.dijkstra(0, 2, weighted=False) == [0, 2]

    def test_agrees_with_exhaustive_search(self, board):
        for target in (1, 2, 3, 4, 5):
            fast = board.dijkstra(0, target)
            slow = board.shortest_simple_path(0, target, weighted=True)
            assert board.path_length(fast) == board.path_length(slow)

    def test_unreachable(self, sample_graph):
        assert sample_graph.dijkstra(0, 8) == []
        assert sample_graph.dijkstra(0, 0) == [0]


class TestPathLength:

    def test_lengths(self, board):
        assert board.path_length([0, 1, 2]) == 3
        assert board.path_length([0, 1, 2], weighted=False) == 2
        assert board.path_length([4]) == 0

    def test_non_adjacent_hop(self, board):
        with pytest.raises(InvalidPreconditionError):
            board.path_length([0, 2])


class TestMinBlockingEdgeSet:

    @staticmethod
    def _separates(graph, cut, u, v) -> bool:
        scratch = graph.copy()
        for edge in cut:
            scratch.remove_edge(edge)
        return v not in scratch.connected_class(u)

    def test_bridge(self, build):
        graph = build((0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3))
        assert graph.min_blocking_edge_set(0, 4) == {pyedge(2, 3)}

    def test_square(self, build):
        square = build((0, 1), (1, 2), (2, 3), (3, 0))
        cut = square.min_blocking_edge_set(0, 2)
        assert len(cut) == 2
        assert self._separates(square, cut, 0, 2)

    def test_parallel_edges_all_need_cutting(self):
        graph = pyroutegraph([pyedge(0, 1, pyroute("A")), pyedge(0, 1, pyroute("B")), pyedge(1, 2)])
        assert graph.min_blocking_edge_set(0, 1) == {pyedge(0, 1, pyroute("A")), pyedge(0, 1, pyroute("B"))}
        assert graph.min_blocking_edge_set(0, 2) == {pyedge(1, 2)}

    def test_board(self, board):
        cut = board.min_blocking_edge_set(0, 5)
        assert len(cut) == 1
        assert self._separates(board, cut, 0, 5)

    def test_degenerate(self, sample_graph):
        assert sample_graph.min_blocking_edge_set(0, 42) == set()
        assert sample_graph.min_blocking_edge_set(0, 0) == set()
        assert sample_graph.min_blocking_edge_set(0, 99) == set()
