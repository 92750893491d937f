"""
Core data classes for route network representation.

This module contains the fundamental value types used throughout
the routegraph library.
"""

from .route import pyroute, RouteCategory
from .edge import pyedge

__all__ = [
    'pyroute',
    'RouteCategory',
    'pyedge',
]
