"""
Network operation modules for modifying route networks.
"""

from .modification import GraphModifier

__all__ = ['GraphModifier']
