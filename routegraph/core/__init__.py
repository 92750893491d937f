"""
Core graph data structures and management.

This module contains the fundamental multigraph representation and the
facade that exposes the full analysis API.
"""

from .graph import RouteGraph

__all__ = ['RouteGraph']
