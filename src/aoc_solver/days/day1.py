"""Day 1: count depth increases in a sonar sweep."""

from typing import List, Sequence

from aoc_solver.harness.input import RawInput


def solve_part1(input: RawInput) -> int:
    depths = input.per_line(lambda line: line.single(int))
    return count_increases(depths)


def solve_part2(input: RawInput) -> int:
    depths = input.per_line(lambda line: line.single(int))
    windows: List[int] = [
        depths[i] + depths[i - 1] + depths[i - 2] for i in range(2, len(depths))
    ]
    return count_increases(windows)


def count_increases(values: Sequence[int]) -> int:
    return sum(1 for i in range(1, len(values)) if values[i] > values[i - 1])
