"""
Network analysis modules for classifying and searching route networks.

This module contains classes for connectivity classification, isomorphism
testing and path finding.
"""

from .connectivity import ConnectivityAnalyzer
from .pathfinding import PathFinder
from .isomorphism import is_graphic_sequence, are_isomorphic, find_isomorphism

__all__ = [
    'ConnectivityAnalyzer',
    'PathFinder',
    'is_graphic_sequence',
    'are_isomorphic',
    'find_isomorphism',
]
