from paris.interpreter import run_program


def test_program_6_nested_loops(capsys, example_source):
    result = run_program(example_source('program_6.paris'))
    out = capsys.readouterr().out.strip()
    assert result.ok
    assert out.split('\n') == ['*', '*', '*', '-', '*', '*', '*', '-']
