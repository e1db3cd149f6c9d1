"""Schema for the result of scanning a string for a hexadecimal numeral."""

from __future__ import annotations

from dataclasses import dataclass

from models.enums import Sign


@dataclass(slots=True, frozen=True)
class HexScan:
    text: str
    sign: Sign
    has_prefix: bool
    digits: str
    start: int
    end: int

    @property
    def is_valid(self) -> bool:
        return bool(self.digits)

    @property
    def rest(self) -> str:
        return self.text[self.end :]

    @property
    def value(self) -> int | None:
        if not self.digits:
            return None
        magnitude = int(self.digits, 16)
        return -magnitude if self.sign is Sign.MINUS else magnitude
