"""Registered daily puzzle solutions.

Each day module exposes ``solve_part1`` and ``solve_part2``, both taking a
:class:`~aoc_solver.harness.input.RawInput`.
"""

from typing import Callable, Dict, List, NamedTuple

from aoc_solver.harness.input import RawInput

from . import day1, day9, day15


class DaySolution(NamedTuple):
    solve_part1: Callable[[RawInput], object]
    solve_part2: Callable[[RawInput], object]


SOLUTIONS: Dict[int, DaySolution] = {
    1: DaySolution(day1.solve_part1, day1.solve_part2),
    9: DaySolution(day9.solve_part1, day9.solve_part2),
    15: DaySolution(day15.solve_part1, day15.solve_part2),
}


def get_solution(day: int) -> DaySolution:
    """Look up the solution for ``day``.

    Raises:
        KeyError: If no solution is registered for the day
    """
    try:
        return SOLUTIONS[day]
    except KeyError:
        raise KeyError(f"No solution registered for day {day}") from None


def available_days() -> List[int]:
    return sorted(SOLUTIONS)


__all__ = ['DaySolution', 'SOLUTIONS', 'get_solution', 'available_days']
