from paris.errors import EvaluationError, VariableNotFound
from paris.interpreter import run_program


def test_program_7_missing_variable_does_not_stop_program(capsys, example_source):
    source = example_source('program_7.paris')
    result = run_program(source)
    out = capsys.readouterr().out.strip()
    assert out == 'still running'
    assert not result.syntax_errors
    assert len(result.evaluation_errors) == 1
    error = result.evaluation_errors[0]
    assert isinstance(result.outcomes[0], EvaluationError)
    assert error.kind == VariableNotFound('missing')
    assert source[error.span.start:error.span.end] == 'missing'
