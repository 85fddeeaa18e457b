"""Views over raw puzzle input text."""

from typing import Any, Callable, List, Pattern, Tuple, TypeVar, Union

from aoc_solver.util.parsing import parse_with_regex

T = TypeVar('T')


class LineInput:
    """A single line of puzzle input."""

    def __init__(self, text: str):
        self._text = text

    def __repr__(self) -> str:
        return f"LineInput({self._text!r})"

    def as_str(self) -> str:
        return self._text

    def single(self, type_: Callable[[str], T] = int) -> T:
        """Parse the whole line as one value."""
        return type_(self._text.strip())

    def chars(self) -> List[str]:
        return list(self._text)

    def bytes(self) -> List[int]:
        return list(self._text.encode())

    def digits(self) -> List[int]:
        return [int(c) for c in self._text]

    def split(self, separator: str, type_: Callable[[str], T] = str) -> List[T]:
        return [type_(part) for part in self._text.split(separator)]

    def split_whitespace(self, type_: Callable[[str], T] = str) -> List[T]:
        return [type_(part) for part in self._text.split()]

    def parse_with_regex(self, pattern: Union[str, Pattern],
                         *types: Callable[[str], Any]) -> Tuple[Any, ...]:
        return parse_with_regex(pattern, self._text, *types)


class RawInput:
    """The full text of a puzzle input."""

    def __init__(self, text: str):
        self._text = text

    def __repr__(self) -> str:
        preview = self._text[:20] + ('...' if len(self._text) > 20 else '')
        return f"RawInput({preview!r})"

    def as_str(self) -> str:
        return self._text

    def lines(self) -> List[str]:
        return self._text.splitlines()

    def single_line(self, fn: Callable[[LineInput], T]) -> T:
        """Apply ``fn`` to the first line."""
        return fn(LineInput(self.lines()[0]))

    def per_line(self, fn: Callable[[LineInput], T]) -> List[T]:
        """Apply ``fn`` to every line."""
        return [fn(LineInput(line)) for line in self.lines()]

    def grouped_lines(self, fn: Callable[[LineInput], T]) -> List[List[T]]:
        """Apply ``fn`` to every line of each blank-line separated group."""
        return [
            [fn(LineInput(line)) for line in group.splitlines()]
            for group in self._text.split('\n\n')
        ]
