"""Day 9: low points and basins in a height map."""

import math
from typing import List, Tuple

from aoc_solver.harness.input import RawInput
from aoc_solver.search import bfs
from aoc_solver.util.grid import Grid

Position = Tuple[int, int]


def solve_part1(input: RawInput) -> int:
    grid = Grid.parse_digits(input.as_str())
    return sum(int(grid[ij]) + 1 for ij in get_low_points(grid))


def solve_part2(input: RawInput) -> int:
    grid = Grid.parse_digits(input.as_str())
    basin_sizes = sorted(
        (get_basin_size(grid, low_point) for low_point in get_low_points(grid)),
        reverse=True,
    )
    return math.prod(basin_sizes[:3])


def get_low_points(grid: Grid) -> List[Position]:
    return [
        ij for ij in grid.indices()
        if all(grid[n] > grid[ij] for n in grid.orthogonal_neighbors(ij))
    ]


def get_basin_size(grid: Grid, low_point: Position) -> int:
    # No goal: the search finalizes every reachable cell.
    result = bfs.search(
        low_point,
        lambda ij: [n for n in grid.orthogonal_neighbors(ij) if grid[n] != 9],
        lambda _: False,
    )
    return len(result)
