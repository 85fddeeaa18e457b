"""Integer coordinates in 2, 3 or 4 dimensions.

Coordinates are tuples, so they hash and compare by value and can be used
directly as search states or dictionary keys.
"""

from itertools import product
from typing import List


class Coord(tuple):
    """Immutable integer vector with element-wise arithmetic."""

    dimensions: int = 0

    def __new__(cls, *components: int):
        if cls.dimensions and len(components) != cls.dimensions:
            raise ValueError(
                f"{cls.__name__} takes {cls.dimensions} components, got {len(components)}"
            )
        return super().__new__(cls, components)

    def __repr__(self) -> str:
        return f"{type(self).__name__}{tuple.__repr__(self)}"

    def __getnewargs__(self):
        return tuple(self)

    def _check_dimensions(self, other: 'Coord') -> None:
        if len(other) != len(self):
            raise ValueError(f"Dimension mismatch: {self!r} and {other!r}")

    def __add__(self, other: 'Coord') -> 'Coord':
        self._check_dimensions(other)
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: 'Coord') -> 'Coord':
        self._check_dimensions(other)
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> 'Coord':
        return type(self)(*(-a for a in self))

    def __mul__(self, scalar: int) -> 'Coord':
        return type(self)(*(a * scalar for a in self))

    __rmul__ = __mul__

    def __floordiv__(self, scalar: int) -> 'Coord':
        return type(self)(*(a // scalar for a in self))

    def manhattan_norm(self) -> int:
        """Sum of the absolute values of the components."""
        return sum(abs(a) for a in self)

    def neighbors(self) -> List['Coord']:
        """All coordinates differing by at most 1 in every component."""
        result = []
        for offsets in product((-1, 0, 1), repeat=len(self)):
            if any(offsets):
                result.append(type(self)(*(a + d for a, d in zip(self, offsets))))
        return result

    def orthogonal_neighbors(self) -> List['Coord']:
        """Coordinates one step away along a single axis."""
        result = []
        for axis in range(len(self)):
            for delta in (-1, 1):
                neighbor = list(self)
                neighbor[axis] += delta
                result.append(type(self)(*neighbor))
        return result


class Coord2(Coord):
    dimensions = 2


class Coord3(Coord):
    dimensions = 3


class Coord4(Coord):
    dimensions = 4
