from paris.interpreter import run_program
from paris.values import Range


def test_program_12_range_held_in_variable(capsys, example_source):
    result = run_program(example_source('program_12.paris'))
    out = capsys.readouterr().out.strip()
    assert result.ok
    assert out == '2..4\n2..4'
    assert result.environment.get('bounds') == Range(2, 4)
