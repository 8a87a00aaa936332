import pytest

from paris.environment import Environment
from paris.values import Null, String, Number, Boolean, Range, format_number


@pytest.mark.parametrize('value,text', [
    (Null(), ''),
    (String('plain text'), 'plain text'),
    (Boolean(True), 'true'),
    (Boolean(False), 'false'),
    (Range(3, 7), '3..7'),
    (Range(-2, 0), '-2..0'),
    (Number(5.0), '5'),
    (Number(1.5), '1.5'),
])
def test_display_form(value, text):
    assert str(value) == text


@pytest.mark.parametrize('n,text', [
    (0.0, '0'),
    (-0.0, '-0'),
    (100.0, '100'),
    (0.1, '0.1'),
    (1e21, '1000000000000000000000'),
    (1e23, '100000000000000000000000'),
    (1.5e16, '15000000000000000'),
    (1e-7, '0.0000001'),
    (float('nan'), 'NaN'),
    (float('inf'), 'inf'),
    (float('-inf'), '-inf'),
])
def test_format_number(n, text):
    assert format_number(n) == text


def test_range_iterations():
    assert Range(0, 4).iterations == 4
    assert Range(4, 4).iterations == 0
    assert Range(9, 1).iterations == 0


def test_values_are_immutable():
    value = String('a')
    with pytest.raises(AttributeError):
        value.value = 'b'


def test_environment_is_flat():
    env = Environment()
    assert 'x' not in env
    assert env.get('x') is None
    env.set('x', Number(1.0))
    env.set('x', Number(2.0))
    env.set('a', Null())
    assert env.get('x') == Number(2.0)
    assert env.names() == ['a', 'x']
    assert len(env) == 2
