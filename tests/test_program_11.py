from paris.interpreter import run_program


def test_program_11_semicolon_terminators(capsys, example_source):
    result = run_program(example_source('program_11.paris'))
    out = capsys.readouterr().out.strip()
    assert result.ok
    assert out == 'hi, paris'
