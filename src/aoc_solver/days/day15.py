"""Day 15: lowest total risk path through a cave."""

import numpy as np

from aoc_solver.harness.input import RawInput
from aoc_solver.search import dijkstra
from aoc_solver.util.grid import Grid


def solve_part1(input: RawInput) -> int:
    grid = Grid.parse_digits(input.as_str())
    return shortest_path_length(grid)


def solve_part2(input: RawInput) -> int:
    grid = Grid.parse_digits(input.as_str())
    return shortest_path_length(expand_grid(grid))


def shortest_path_length(grid: Grid) -> int:
    target = (grid.nrows - 1, grid.ncols - 1)
    result = dijkstra.search(
        (0, 0),
        lambda ij: [(n, int(grid[n])) for n in grid.orthogonal_neighbors(ij)],
        lambda ij: ij == target,
    )
    return result.distance_to_goal()


def expand_grid(grid: Grid, times: int = 5) -> Grid:
    """Tile the grid, adding the tile's row and column offset to each risk.

    Risks above 9 wrap back around to 1.
    """
    tiles = [
        [(grid.values + i + j - 1) % 9 + 1 for j in range(times)]
        for i in range(times)
    ]
    return Grid(np.block(tiles))
