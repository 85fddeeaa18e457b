"""Two-dimensional grids backed by numpy arrays."""

from typing import Any, Callable, Iterator, List, Sequence, Tuple

import numpy as np

from .coords import Coord2

Position = Tuple[int, int]


class Grid:
    """A rectangular grid addressed by ``(row, col)`` positions."""

    def __init__(self, values: np.ndarray):
        values = np.asarray(values)
        if values.ndim != 2:
            raise ValueError(f"Grid requires a 2-D array, got shape {values.shape}")
        self.values = values

    @classmethod
    def parse_digits(cls, text: str) -> 'Grid':
        """Parse lines of single decimal digits, e.g. ``"123\\n456"``."""
        return cls._parse(text, lambda line: [int(c) for c in line], dtype=np.int64)

    @classmethod
    def parse_chars(cls, text: str) -> 'Grid':
        """Parse lines of characters, one cell per character."""
        return cls._parse(text, list, dtype='<U1')

    @classmethod
    def parse_bytes(cls, text: str) -> 'Grid':
        """Parse lines of ASCII characters into their byte values."""
        return cls._parse(text, lambda line: list(line.encode()), dtype=np.uint8)

    @classmethod
    def parse_on_whitespace(cls, text: str, dtype: Any = np.int64) -> 'Grid':
        """Parse lines of whitespace separated values."""
        return cls._parse(text, str.split, dtype=dtype)

    @classmethod
    def _parse(cls, text: str, parse_line: Callable[[str], Sequence], dtype: Any) -> 'Grid':
        rows: List[Sequence] = [parse_line(line) for line in text.splitlines()]
        if not rows:
            raise ValueError("Cannot parse a grid from empty input")
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError(f"Ragged grid input: row widths {sorted(widths)}")
        return cls(np.array(rows, dtype=dtype))

    @property
    def nrows(self) -> int:
        return self.values.shape[0]

    @property
    def ncols(self) -> int:
        return self.values.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.values.shape

    def __getitem__(self, position: Position) -> Any:
        return self.values[position]

    def __setitem__(self, position: Position, value: Any) -> None:
        self.values[position] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.values, other.values))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid({self.values!r})"

    def in_bounds(self, position: Position) -> bool:
        i, j = position
        return 0 <= i < self.nrows and 0 <= j < self.ncols

    def neighbors(self, position: Position) -> Iterator[Position]:
        """In-bounds positions including diagonals."""
        for i, j in Coord2(*position).neighbors():
            if self.in_bounds((i, j)):
                yield (i, j)

    def orthogonal_neighbors(self, position: Position) -> Iterator[Position]:
        """In-bounds positions sharing an edge with ``position``."""
        for i, j in Coord2(*position).orthogonal_neighbors():
            if self.in_bounds((i, j)):
                yield (i, j)

    def indices(self) -> Iterator[Position]:
        """All positions in row-major order."""
        for i in range(self.nrows):
            for j in range(self.ncols):
                yield (i, j)

    def map(self, fn: Callable[[Any], Any]) -> 'Grid':
        """Build a new grid by applying ``fn`` to every cell."""
        mapped = [[fn(value) for value in row] for row in self.values]
        return Grid(np.array(mapped))
