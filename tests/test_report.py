from rich.console import Console

from paris.errors import EvaluationError, VariableNotFound, Span
from paris.parser import parse_program
from paris.report import format_error, line_col, report_errors


def render(source, errors):
    console = Console(record=True, width=120, color_system=None)
    count = report_errors(source, errors, 'prog.paris', console=console)
    return count, console.export_text()


def test_line_col():
    source = 'ab\ncd\n'
    assert line_col(source, 0) == (1, 1)
    assert line_col(source, 4) == (2, 2)
    assert line_col(source, 6) == (3, 1)


def test_unclosed_brace_report():
    source = 'x := 1.\nwhile true { display(x)'
    errors = parse_program(source).errors
    count, text = render(source, errors)
    assert count == 1
    assert 'Unclosed delimiter {' in text
    assert 'prog.paris:2:12' in text
    assert 'Must be closed before this end of file' in text
    assert 'while true { display(x)' in text


def test_unexpected_token_report():
    source = 'display(`a`) display(`b`)'
    _, text = render(source, parse_program(source).errors)
    assert "Unexpected token in input, expected '.', ';', end of input" in text
    assert '^^^^^^^ Unexpected token display' in text


def test_evaluation_error_report():
    source = 'display(ghost)'
    error = EvaluationError(VariableNotFound('ghost'), Span(8, 13))
    _, text = render(source, [error])
    assert 'undefined variable ghost' in text
    assert '        ^^^^^' in text


def test_format_error_is_plain_text_without_console():
    source = '1.2.3'
    [error] = parse_program(source).errors
    assert str(format_error(source, error)).startswith('Error: could not convert string to float')
