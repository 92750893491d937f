"""
Route payload carried by multigraph edges.

A route is the game-board connection an edge stands for. Two routes between
the same cities are different routes when their names differ, which is what
makes parallel edges distinguishable.
"""

from dataclasses import dataclass
from enum import Enum


class RouteCategory(Enum):
    """Transport pool a route draws from."""
    LAND = "land"
    SEA = "sea"

    @classmethod
    def coerce(cls, value) -> 'RouteCategory':
        """
        Normalise a payload category to a member.

        Accepts members, their values ("sea") or their names ("SEA") in any case.

        Raises:
            ValueError: If the value names no category
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())


@dataclass(frozen=True)
class pyroute:
    """
    Immutable route between two cities.

    Attributes:
        name: Unique route name (e.g. "R12")
        length: Number of pieces needed to claim the route
        category: LAND routes consume wagons, SEA routes consume boats
    """
    name: str
    length: int = 1
    category: RouteCategory = RouteCategory.LAND

    @property
    def is_maritime(self) -> bool:
        return self.category is RouteCategory.SEA

    def __str__(self) -> str:
        return f"{self.name}({self.category.value}, {self.length})"
