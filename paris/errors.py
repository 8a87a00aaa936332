"""Error types shared by the Paris parser and interpreter.

Two independent families live here. Syntax errors are produced by the
parser and collected into a list; evaluation errors are raised by the
interpreter and caught per top-level statement. Both carry a `Span` so
that diagnostics can point back into the source text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` into the source."""
    start: int
    end: int

    def __repr__(self) -> str:
        return f"{self.start}..{self.end}"


###############################################################################
# Syntax errors
###############################################################################


class ParseError(Exception):
    """Base class for syntax errors.

    Parser rules raise these to abandon the current statement. The
    statement loop catches them, records them and resynchronises, so a
    single parse can report several of them.
    """
    reason = 'custom'

    def __init__(self, message: str, span: Span):
        super().__init__(message)
        self.message = message
        self.span = span

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, {self.span!r})"


class UnclosedDelimiter(ParseError):
    """An opening delimiter reached the point where it had to be closed.

    `span` is where closure was expected (from the opening delimiter
    through the offending token, or through end of input) and `found` is
    the token seen there, ``None`` for end of input.
    """
    reason = 'unclosed'

    def __init__(self, delimiter: str, span: Span, found: Optional[str] = None,
                 opened_at: Optional[Span] = None):
        where = repr(found) if found is not None else 'end of input'
        super().__init__(f"unclosed delimiter {delimiter!r}, must be closed before {where}", span)
        self.delimiter = delimiter
        self.found = found
        self.opened_at = opened_at if opened_at is not None else Span(span.start, span.start + len(delimiter))


class UnexpectedToken(ParseError):
    """Input that no alternative at a choice point accepts."""
    reason = 'unexpected'

    def __init__(self, found: Optional[str], expected: Sequence[str], span: Span):
        self.found = found
        self.expected: Tuple[str, ...] = tuple(dict.fromkeys(expected))
        head = f"unexpected token {found!r}" if found is not None else 'unexpected end of input'
        wanted = ', '.join(self.expected) if self.expected else 'something else'
        super().__init__(f"{head}, expected {wanted}", span)


class CustomError(ParseError):
    """Free-form syntax error, e.g. a malformed numeric or range literal."""
    reason = 'custom'


###############################################################################
# Evaluation errors
###############################################################################


@dataclass(frozen=True)
class FunctionNotFound:
    name: str

    def __str__(self) -> str:
        return f"invalid function {self.name}"


@dataclass(frozen=True)
class VariableNotFound:
    name: str

    def __str__(self) -> str:
        return f"undefined variable {self.name}"


@dataclass(frozen=True)
class Unsupported:
    """A node that has no evaluation rule, such as a stray operator run."""
    description: str

    def __str__(self) -> str:
        return f"cannot evaluate {self.description}"


class EvaluationError(Exception):
    """Exception used to propagate Paris runtime errors to the statement loop."""
    def __init__(self, kind, span: Span):
        super().__init__(str(kind))
        self.kind = kind
        self.span = span

    def __repr__(self) -> str:
        return f"EvaluationError({self.kind!r}, {self.span!r})"
