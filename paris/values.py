"""Runtime values for Paris.

Values are immutable. `str()` of a value is its display form, which is
what the `display` builtin prints and what the command line echoes for
top-level statements.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import math


class Value:
    """Base class for all runtime values."""
    __slots__ = ()


@dataclass(frozen=True)
class Null(Value):
    """Result of statements that produce nothing; displays as empty text."""

    def __str__(self) -> str:
        return ''


@dataclass(frozen=True)
class String(Value):
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number(Value):
    value: float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Boolean(Value):
    value: bool

    def __str__(self) -> str:
        return 'true' if self.value else 'false'


@dataclass(frozen=True)
class Range(Value):
    """Half-open integer interval; `start` inclusive, `end` exclusive."""
    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    @property
    def iterations(self) -> int:
        return max(self.end - self.start, 0)


NULL = Null()


def format_number(n: float) -> str:
    """Render a double the way Paris prints numbers.

    Integral values drop the fractional part and nothing is ever shown
    in exponent notation: ``5.0`` prints as ``5`` and ``1e-07`` as
    ``0.0000001``.
    """
    if math.isnan(n):
        return 'NaN'
    if math.isinf(n):
        return 'inf' if n > 0 else '-inf'
    if n == 0:
        return '-0' if math.copysign(1.0, n) < 0 else '0'
    text = repr(n)
    if 'e' in text or 'E' in text:
        text = format(Decimal(text), 'f')
    if text.endswith('.0'):
        text = text[:-2]
    return text


def type_name(value: Value) -> str:
    return type(value).__name__
