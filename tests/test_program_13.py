from paris.errors import FunctionNotFound
from paris.interpreter import run_program


def test_program_13_unknown_function(capsys, example_source):
    source = example_source('program_13.paris')
    result = run_program(source)
    out = capsys.readouterr().out.strip()
    # the failing call prints nothing, later statements still run
    assert out == 'ok'
    [error] = result.evaluation_errors
    assert error.kind == FunctionNotFound('print')
    assert source[error.span.start:error.span.end] == 'print'
