"""
Degree sequence realizability and isomorphism testing.

Both checks ignore edge routes and lengths. The isomorphism test is an
exhaustive backtracking search: it is exponential in the worst case and is
meant for small networks such as board maps.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple
from collections import Counter

import numpy as np

from ..core.graph import RouteGraph
from ..exceptions import InvalidPreconditionError

logger = logging.getLogger(__name__)


def is_graphic_sequence(sequence: Sequence[int]) -> bool:
    """
    Decide whether a sequence is the degree sequence of a simple graph.

    Uses the Havel-Hakimi reduction: repeatedly remove the largest degree d
    and subtract 1 from the d next largest entries.

    Args:
        sequence: Non-negative integer degrees, in any order

    Returns:
        True if some simple graph has exactly these degrees

    Raises:
        InvalidPreconditionError: If an entry is negative or not an integer
    """
    entries = list(sequence)
    if any(int(d) != d for d in entries):
        logger.error(f"Degree sequence has non-integer entries: {entries}")
        raise InvalidPreconditionError("degree sequence entries must be integers")

    degrees = np.array(entries, dtype=int)
    if degrees.size and degrees.min() < 0:
        logger.error(f"Degree sequence has negative entries: {list(sequence)}")
        raise InvalidPreconditionError("degree sequence entries must be non-negative")

    if int(degrees.sum()) % 2 != 0:
        return False

    while degrees.size:
        degrees = np.sort(degrees)[::-1]
        largest = int(degrees[0])
        degrees = degrees[1:]
        if largest == 0:
            return True
        if largest > degrees.size:
            return False
        degrees[:largest] -= 1
        if degrees[:largest].min() < 0:
            return False

    return True


def _pair_multiplicities(graph: RouteGraph) -> Counter:
    """Count edges per unordered vertex pair."""
    return Counter(edge.endpoints for edge in graph.edges())


def _pair_key(u: int, v: int) -> Tuple[int, int]:
    return (u, v) if u <= v else (v, u)


def find_isomorphism(g1: RouteGraph, g2: RouteGraph) -> Optional[Dict[int, int]]:
    """
    Search for a vertex bijection preserving adjacency between two graphs.

    Candidate images of a vertex are the unused vertices of g2 with the same
    degree; a partial mapping is abandoned as soon as one mapped pair has a
    different edge multiplicity in the two graphs.

    Args:
        g1: First graph
        g2: Second graph

    Returns:
        Mapping from g1 vertex ids to g2 vertex ids, or None if not isomorphic
    """
    if g1.vertex_count() != g2.vertex_count() or g1.edge_count() != g2.edge_count():
        return None
    if g1.degree_sequence() != g2.degree_sequence():
        return None

    pairs1 = _pair_multiplicities(g1)
    pairs2 = _pair_multiplicities(g2)

    # Most constrained vertices first
    order: List[int] = sorted(g1.vertices(), key=lambda v: (-g1.degree(v), v))
    candidates: Dict[int, List[int]] = {
        v: sorted(w for w in g2.vertices() if g2.degree(w) == g1.degree(v))
        for v in order
    }

    mapping: Dict[int, int] = {}
    used = set()

    def consistent(v: int, w: int) -> bool:
        for mapped_v, mapped_w in mapping.items():
            if pairs1.get(_pair_key(v, mapped_v), 0) != pairs2.get(_pair_key(w, mapped_w), 0):
                return False
        return True

    def extend(depth: int) -> bool:
        if depth == len(order):
            return True
        v = order[depth]
        for w in candidates[v]:
            if w in used or not consistent(v, w):
                continue
            mapping[v] = w
            used.add(w)
            if extend(depth + 1):
                return True
            del mapping[v]
            used.remove(w)
        return False

    if extend(0):
        logger.debug(f"Found isomorphism over {len(mapping)} vertices")
        return dict(mapping)
    return None


def are_isomorphic(g1: RouteGraph, g2: RouteGraph) -> bool:
    """True if some vertex bijection maps the edges of g1 onto those of g2."""
    return find_isomorphism(g1, g2) is not None
