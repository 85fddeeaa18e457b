"""Run a day's solution against its test input and real input.

Input files live in one directory and are named ``day{N}-input.txt`` and
``day{N}-test-input.txt``. A test input file starts with the expected
answers, followed by a blank line and the test input itself::

    Part 1 expected: 7
    Part 2 expected:

    199
    200
    ...

A blank expectation skips the test run for that part.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from aoc_solver.util.parsing import regex
from aoc_solver.util.string_enum import StringEnum

from .input import RawInput

logger = logging.getLogger(__name__)

SolveFn = Callable[[RawInput], Any]

TEST_INPUT_PATTERN = (
    r"(?s)^Part 1 expected: *([^\n]+)?\n"
    r"Part 2 expected: *([^\n]+)?\n"
    r" *\n"
    r"(.*)$"
)


class InputFormatError(ValueError):
    """Raised when a test input file does not follow the expected layout."""
    pass


class PartStatus(StringEnum):
    PASSED = "passed"
    SOLVED = "solved"
    FAILED_TEST = "failed_test"
    NOT_IMPLEMENTED = "not_implemented"


@dataclass
class TestInput:
    """Expected answers and text parsed from a test input file."""
    __test__ = False  # not a pytest test class

    part1_expected: Optional[str]
    part2_expected: Optional[str]
    text: str

    @classmethod
    def parse(cls, raw: str) -> 'TestInput':
        match = regex(TEST_INPUT_PATTERN).match(raw)
        if match is None:
            raise InputFormatError("Invalid test input format.")
        part1, part2, text = match.groups()
        return cls(
            part1_expected=part1.strip() if part1 else None,
            part2_expected=part2.strip() if part2 else None,
            text=text,
        )

    def expected(self, part: int) -> Optional[str]:
        return self.part1_expected if part == 1 else self.part2_expected


@dataclass
class PartOutcome:
    """What happened when one part was run."""
    part: int
    status: PartStatus
    output: Optional[str] = None
    test_output: Optional[str] = None
    expected: Optional[str] = None
    duration: Optional[float] = None  # seconds, real input only

    @property
    def success(self) -> bool:
        return self.status in (PartStatus.PASSED, PartStatus.SOLVED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'part': self.part,
            'status': str(self.status),
            'output': self.output,
            'test_output': self.test_output,
            'expected': self.expected,
            'duration': self.duration,
        }


def solve_part(part: int,
               solve: SolveFn,
               input_text: str,
               test_input_text: Optional[str] = None,
               expected: Optional[str] = None) -> PartOutcome:
    """Check ``solve`` against the test input, then time it on the real input.

    A solution raising NotImplementedError is reported as not implemented.
    Any other exception propagates.

    Args:
        part: Part number (1 or 2)
        solve: Solution function taking a RawInput
        input_text: Real puzzle input
        test_input_text: Test input, used only when ``expected`` is given
        expected: Expected test output, compared as a string

    Returns:
        PartOutcome for this part
    """
    test_output = None
    if expected is not None and test_input_text is not None:
        try:
            test_output = str(solve(RawInput(test_input_text)))
        except NotImplementedError:
            logger.info(f"Part {part} is not implemented")
            return PartOutcome(part, PartStatus.NOT_IMPLEMENTED, expected=expected)
        if test_output != expected:
            logger.warning(f"Part {part} test output {test_output} != expected {expected}")
            return PartOutcome(part, PartStatus.FAILED_TEST,
                               test_output=test_output, expected=expected)

    try:
        start_time = time.perf_counter()
        output = solve(RawInput(input_text))
        duration = time.perf_counter() - start_time
    except NotImplementedError:
        logger.info(f"Part {part} is not implemented")
        return PartOutcome(part, PartStatus.NOT_IMPLEMENTED,
                           test_output=test_output, expected=expected)

    status = PartStatus.PASSED if test_output is not None else PartStatus.SOLVED
    logger.info(f"Part {part} solved in {format_duration(duration)}")
    return PartOutcome(part, status, output=str(output), test_output=test_output,
                       expected=expected, duration=duration)


def input_paths(day: int, input_dir: Union[str, Path]) -> Dict[str, Path]:
    input_dir = Path(input_dir)
    return {
        'input': input_dir / f"day{day}-input.txt",
        'test_input': input_dir / f"day{day}-test-input.txt",
    }


def solve_day(day: int,
              solve_part1: SolveFn,
              solve_part2: SolveFn,
              input_dir: Union[str, Path] = "input",
              run_tests: bool = True) -> List[PartOutcome]:
    """Run both parts of a day's solution.

    Args:
        day: Day number, used to locate input files
        solve_part1: Solution for part 1
        solve_part2: Solution for part 2
        input_dir: Directory holding the input files
        run_tests: Whether to check against the test input first

    Returns:
        Outcomes for part 1 and part 2

    Raises:
        FileNotFoundError: If the real input file is missing
        InputFormatError: If the test input file is malformed
    """
    paths = input_paths(day, input_dir)
    input_text = paths['input'].read_text()

    test_input = None
    if run_tests:
        if paths['test_input'].exists():
            test_input = TestInput.parse(paths['test_input'].read_text())
        else:
            logger.warning(f"No test input found at {paths['test_input']}")

    outcomes = []
    for part, solve in ((1, solve_part1), (2, solve_part2)):
        outcomes.append(solve_part(
            part,
            solve,
            input_text,
            test_input_text=test_input.text if test_input else None,
            expected=test_input.expected(part) if test_input else None,
        ))
    return outcomes


def format_outcome(outcome: PartOutcome) -> List[str]:
    """Render an outcome as the lines printed by the ``run`` command."""
    part = outcome.part
    lines = []
    if outcome.status == PartStatus.NOT_IMPLEMENTED:
        return [f"Part {part} not implemented."]
    if outcome.test_output is not None:
        if outcome.status == PartStatus.FAILED_TEST:
            lines.append(f"Part {part} test output: {outcome.test_output} ❌")
            lines.append(f"          Expected: {outcome.expected}")
            return lines
        lines.append(f"Part {part} test output: {outcome.test_output} ✅")
    lines.append(f"Part {part} output: {outcome.output}")
    lines.append(f"   ↑ Duration: {format_duration(outcome.duration)}")
    return lines


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0.001:
        return f"{seconds*1000000:.1f}µs"
    elif seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.1f}s"
