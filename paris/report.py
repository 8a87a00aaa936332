"""Render Paris syntax and evaluation errors against the source text.

Output goes through Rich consoles, which style it in a terminal and fall
back to plain text when piped.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

from rich.console import Console
from rich.text import Text

from .errors import (
    Span, ParseError, UnclosedDelimiter, UnexpectedToken, EvaluationError,
)

__all__ = ["err_console", "line_col", "format_error", "report_errors"]

err_console = Console(stderr=True, highlight=False)

Reportable = Union[ParseError, EvaluationError]


def line_col(source: str, offset: int) -> Tuple[int, int]:
    """1-based line and column of a character offset."""
    offset = max(0, min(offset, len(source)))
    line = source.count('\n', 0, offset) + 1
    column = offset - (source.rfind('\n', 0, offset) + 1) + 1
    return line, column


def headline(error: Reportable) -> str:
    if isinstance(error, UnclosedDelimiter):
        return f"Unclosed delimiter {error.delimiter}"
    if isinstance(error, UnexpectedToken):
        head = 'Unexpected token in input' if error.found is not None else 'Unexpected end of input'
        wanted = ', '.join(error.expected) if error.expected else 'something else'
        return f"{head}, expected {wanted}"
    return str(error)


def label(error: Reportable) -> str:
    if isinstance(error, UnclosedDelimiter):
        found = error.found if error.found is not None else 'end of file'
        return f"Must be closed before this {found}"
    if isinstance(error, UnexpectedToken):
        found = error.found if error.found is not None else 'end of file'
        return f"Unexpected token {found}"
    return str(error)


def format_error(source: str, error: Reportable, filename: Optional[str] = None) -> Text:
    """Build the report for one error: headline, location, source line and underline."""
    span: Span = error.span
    line, column = line_col(source, span.start)
    lines = source.split('\n')
    text_line = lines[line - 1] if line - 1 < len(lines) else ''
    gutter = ' ' * len(str(line))

    # underline stops at the end of the first line of the span
    width = min(max(span.end - span.start, 1), max(len(text_line) - column + 1, 1))

    out = Text()
    out.append('Error', style='bold red')
    out.append(f": {headline(error)}\n", style='bold')
    out.append(f"{gutter}--> ", style='blue')
    out.append(f"{filename or '<source>'}:{line}:{column}\n")
    out.append(f"{gutter} |\n", style='blue')
    out.append(f"{line} | ", style='blue')
    out.append(f"{text_line}\n")
    out.append(f"{gutter} | ", style='blue')
    out.append(' ' * (column - 1))
    style = 'yellow' if isinstance(error, UnclosedDelimiter) else 'red'
    out.append('^' * width + ' ' + label(error), style=style)
    if isinstance(error, UnclosedDelimiter):
        open_line, open_column = line_col(source, error.opened_at.start)
        out.append(f"\n{gutter} = note: ", style='blue')
        out.append(f"delimiter {error.delimiter} opened at {open_line}:{open_column}")
    return out


def report_errors(source: str, errors: Iterable[Reportable], filename: Optional[str] = None,
                  console: Optional[Console] = None) -> int:
    """Print every error in order and return how many were printed."""
    target = console if console is not None else err_console
    count = 0
    for error in errors:
        target.print(format_error(source, error, filename))
        count += 1
    return count
