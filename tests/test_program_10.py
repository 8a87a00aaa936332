from paris.interpreter import run_program


def test_program_10_conditions_that_skip_the_body(capsys, example_source):
    result = run_program(example_source('program_10.paris'))
    out = capsys.readouterr().out.strip()
    assert result.ok
    assert out == 'skipped'
