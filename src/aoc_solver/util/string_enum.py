"""Enums whose members parse from and format to fixed strings."""

from enum import Enum


class ParseEnumError(ValueError):
    """Raised when text does not name any member of a StringEnum."""

    def __init__(self, enum_name: str, invalid_variant: str):
        self.enum_name = enum_name
        self.invalid_variant = invalid_variant
        super().__init__(f"Invalid variant for {enum_name}: {invalid_variant}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseEnumError):
            return NotImplemented
        return (self.enum_name, self.invalid_variant) == (other.enum_name, other.invalid_variant)

    def __hash__(self) -> int:
        return hash((self.enum_name, self.invalid_variant))


class StringEnum(Enum):
    """Base class for enums with string values.

    Example:
        class Color(StringEnum):
            RED = "red"
            GREEN = "green"

        Color.parse("red") is Color.RED
        str(Color.GREEN) == "green"
    """

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> 'StringEnum':
        try:
            return cls(text)
        except ValueError:
            raise ParseEnumError(cls.__name__, text) from None
