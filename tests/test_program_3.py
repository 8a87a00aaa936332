from paris.interpreter import run_program


def test_program_3_rebinding(capsys, example_source):
    result = run_program(example_source('program_3.paris'))
    out = capsys.readouterr().out.strip()
    assert result.ok
    assert out == '2'
