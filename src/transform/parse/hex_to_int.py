"""Parse hexadecimal numerals into integers.

``hex_to_int`` follows "longest valid prefix" radix parsing: leading
whitespace, an optional sign and an optional ``0x``/``0X`` prefix are
consumed, then as many hex digits as possible. Anything after the digits is
ignored. When no digit is found the result is ``NOT_A_NUMBER`` (``None``),
never an exception.

``hex_to_int_strict`` and ``is_hex_numeral`` require the whole input to be a
numeral (surrounding whitespace allowed).
"""

from __future__ import annotations

from typing import cast

from models.enums import ParseFailure, Sign
from models.schemas import HexScan

NOT_A_NUMBER = None

# Whitespace skipped before the numeral. Narrower than str.isspace() (no
# \x1c-\x1f, no \x85) and includes the byte order mark.
WHITESPACE = frozenset(
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class HexParseError(ValueError):
    def __init__(self, value: str, reason: ParseFailure) -> None:
        super().__init__(f"Invalid hexadecimal numeral {value!r}: {reason.value}")
        self.value = value
        self.reason = reason


def scan_hex(value: str) -> HexScan:
    """Locate the leading hexadecimal numeral in ``value``.

    The returned scan records the sign, whether a ``0x`` prefix was seen and
    the digit span ``[start, end)``. ``end`` marks the first unconsumed
    character, so ``scan.rest`` is the ignored tail.
    """
    length = len(value)
    pos = 0
    while pos < length and value[pos] in WHITESPACE:
        pos += 1

    sign = Sign.NONE
    if pos < length and value[pos] in "+-":
        sign = Sign(value[pos])
        pos += 1

    has_prefix = False
    if value[pos : pos + 2] in ("0x", "0X"):
        has_prefix = True
        pos += 2

    start = pos
    while pos < length and value[pos] in HEX_DIGITS:
        pos += 1

    if pos == start:
        # No digits: the whole input is unconsumed.
        return HexScan(text=value, sign=sign, has_prefix=has_prefix, digits="", start=0, end=0)

    return HexScan(
        text=value,
        sign=sign,
        has_prefix=has_prefix,
        digits=value[start:pos],
        start=start,
        end=pos,
    )


def hex_to_int(value: str) -> int | None:
    return scan_hex(value).value


def _strict_failure(value: str, scan: HexScan) -> ParseFailure | None:
    if not value.strip("".join(WHITESPACE)):
        return ParseFailure.EMPTY
    if not scan.is_valid:
        return ParseFailure.NO_DIGITS
    if any(char not in WHITESPACE for char in scan.rest):
        return ParseFailure.TRAILING_CHARACTERS
    return None


def is_hex_numeral(value: str) -> bool:
    return _strict_failure(value, scan_hex(value)) is None


def hex_to_int_strict(value: str) -> int:
    scan = scan_hex(value)
    failure = _strict_failure(value, scan)
    if failure is not None:
        raise HexParseError(value, failure)
    return cast(int, scan.value)
