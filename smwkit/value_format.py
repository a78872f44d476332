"""Number formatting and parsing in binary, octal and hex, and a stepping value editor."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Callable, Optional, Union

Number = Union[int, float]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class ValueSwitcherButtons(enum.Enum):
    """Which pair of icons the decrement and increment buttons show."""

    MINUS_PLUS = "minus_plus"
    LEFT_RIGHT = "left_right"


def _to_i64(n: Number) -> int:
    if isinstance(n, float):
        if math.isnan(n):
            return 0
        if n >= 2.0**63:
            return _I64_MAX
        if n < -(2.0**63):
            return _I64_MIN
    return max(_I64_MIN, min(_I64_MAX, int(n)))


def _format(n: Number, min_width: int, twos_complement: bool, spec: str, name: str) -> str:
    if min_width <= 0:
        raise ValueError(f"{name}: `min_width` must be greater than 0")
    if twos_complement:
        value = _to_i64(n)
        if value < 0:
            value += 2**64
        return format(value, spec).rjust(min_width, "0")
    sign = "-" if n < 0 else ""
    return sign + format(_to_i64(abs(n)), spec).rjust(min_width, "0")


def format_binary(n: Number, min_width: int, twos_complement: bool) -> str:
    """Base 2, zero-padded; negatives as 64-bit two's complement or with a sign."""
    return _format(n, min_width, twos_complement, "b", "binary")


def format_octal(n: Number, min_width: int, twos_complement: bool) -> str:
    """Base 8, zero-padded; negatives as 64-bit two's complement or with a sign."""
    return _format(n, min_width, twos_complement, "o", "octal")


def format_hexadecimal(n: Number, min_width: int, twos_complement: bool, upper: bool) -> str:
    """Base 16, zero-padded; negatives as 64-bit two's complement or with a sign."""
    return _format(n, min_width, twos_complement, "X" if upper else "x", "hexadecimal")


def parse_radix(text: str, radix: int) -> Optional[float]:
    """Parse a signed 64-bit integer in ``radix``; None if the text is not one."""
    body = text
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]
    if not body:
        return None
    valid = _DIGITS[:radix]
    value = 0
    for char in body.lower():
        digit = valid.find(char)
        if digit < 0:
            return None
        value = value * radix + digit
    if negative:
        value = -value
    if not _I64_MIN <= value <= _I64_MAX:
        return None
    return float(value)


def _default_parse(text: str) -> Optional[float]:
    try:
        return float(text)
    except ValueError:
        return None


@dataclass
class ValueSwitcher:
    """A number with a label, step buttons and optional custom text form."""

    value: Number
    label: str
    buttons: ValueSwitcherButtons
    minimum: Number = -math.inf
    maximum: Number = math.inf
    formatter: Optional[Callable[[float], str]] = None
    parser: Optional[Callable[[str], Optional[float]]] = None

    def binary(self, min_width: int, twos_complement: bool) -> "ValueSwitcher":
        """Show and read the value in base 2."""
        format_binary(0, min_width, twos_complement)
        self.formatter = lambda n: format_binary(n, min_width, twos_complement)
        self.parser = lambda s: parse_radix(s, 2)
        return self

    def octal(self, min_width: int, twos_complement: bool) -> "ValueSwitcher":
        """Show and read the value in base 8."""
        format_octal(0, min_width, twos_complement)
        self.formatter = lambda n: format_octal(n, min_width, twos_complement)
        self.parser = lambda s: parse_radix(s, 8)
        return self

    def hexadecimal(self, min_width: int, twos_complement: bool, upper: bool) -> "ValueSwitcher":
        """Show and read the value in base 16."""
        format_hexadecimal(0, min_width, twos_complement, upper)
        self.formatter = lambda n: format_hexadecimal(n, min_width, twos_complement, upper)
        self.parser = lambda s: parse_radix(s, 16)
        return self

    def can_decrement(self) -> bool:
        return self.value > self.minimum

    def can_increment(self) -> bool:
        return self.value < self.maximum

    def decrement(self) -> bool:
        """Step the value down by one if allowed; returns whether it changed."""
        if not self.can_decrement():
            return False
        self.value = self._convert(float(self.value) - 1.0)
        return True

    def increment(self) -> bool:
        """Step the value up by one if allowed; returns whether it changed."""
        if not self.can_increment():
            return False
        self.value = self._convert(float(self.value) + 1.0)
        return True

    def format(self) -> str:
        """The value as text."""
        if self.formatter is not None:
            return self.formatter(float(self.value))
        return str(self.value)

    def parse(self, text: str) -> Optional[Number]:
        """The value that ``text`` stands for, clamped to the range; None if unreadable."""
        parsed = (self.parser or _default_parse)(text)
        if parsed is None:
            return None
        clamped = min(max(parsed, self.minimum), self.maximum)
        return self._convert(float(clamped))

    def _convert(self, n: float) -> Number:
        if isinstance(self.value, int):
            return _to_i64(n)
        return n