"""Regex helpers for pulling typed values out of puzzle text."""

import re
from functools import lru_cache
from typing import Any, Callable, Pattern, Tuple, Union


class RegexParseError(ValueError):
    """Raised when a regex does not match, or has the wrong number of groups."""
    pass


@lru_cache(maxsize=None)
def regex(pattern: str) -> Pattern:
    """Compile ``pattern`` once and reuse the compiled object."""
    return re.compile(pattern)


def parse_with_regex(pattern: Union[str, Pattern],
                     text: str,
                     *types: Callable[[str], Any]) -> Tuple[Any, ...]:
    """Match ``pattern`` against ``text`` and convert each capture group.

    Args:
        pattern: Regex source or compiled pattern
        text: Text to search
        *types: One converter per capture group, e.g. ``str, int``

    Returns:
        Tuple of converted capture groups

    Raises:
        RegexParseError: If there is no match or the group count differs
            from the number of converters
    """
    compiled = regex(pattern) if isinstance(pattern, str) else pattern
    match = compiled.search(text)
    if match is None:
        raise RegexParseError(f"Regex {compiled.pattern!r} did not match {text!r}")
    if compiled.groups != len(types):
        raise RegexParseError(
            f"Expected {len(types)} capture groups, found {compiled.groups}"
        )
    return tuple(convert(group) for convert, group in zip(types, match.groups()))
