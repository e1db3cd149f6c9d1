"""Enums describing the outcome of a hexadecimal scan."""

from enum import Enum


class Sign(str, Enum):
    NONE = ""
    PLUS = "+"
    MINUS = "-"


class ParseFailure(str, Enum):
    EMPTY = "empty"
    NO_DIGITS = "no_digits"
    TRAILING_CHARACTERS = "trailing_characters"
