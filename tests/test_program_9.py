from paris.interpreter import run_program


def test_program_9_boolean_and_range_display(capsys, example_source):
    result = run_program(example_source('program_9.paris'))
    out = capsys.readouterr().out.strip()
    assert result.ok
    assert out == 'true false 1..4'
