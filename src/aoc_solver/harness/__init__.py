"""Input handling and the solve-and-time harness for daily puzzles."""

from .input import LineInput, RawInput
from .runner import (
    InputFormatError, PartOutcome, PartStatus, TestInput,
    format_duration, format_outcome, solve_day, solve_part
)

__all__ = [
    'LineInput',
    'RawInput',
    'InputFormatError',
    'PartOutcome',
    'PartStatus',
    'TestInput',
    'format_duration',
    'format_outcome',
    'solve_day',
    'solve_part',
]
