"""Shared helpers for puzzle solutions.

This package provides coordinates, numpy-backed grids, integer helpers,
regex parsing and string enums.
"""

from .coords import Coord, Coord2, Coord3, Coord4
from .grid import Grid
from .ints import extended_euclidean, gcd, modulus, solve_congruences
from .parsing import RegexParseError, parse_with_regex, regex
from .string_enum import ParseEnumError, StringEnum

__all__ = [
    'Coord',
    'Coord2',
    'Coord3',
    'Coord4',
    'Grid',
    'extended_euclidean',
    'gcd',
    'modulus',
    'solve_congruences',
    'RegexParseError',
    'parse_with_regex',
    'regex',
    'ParseEnumError',
    'StringEnum',
]
