import pytest

from sfutils.structures import ByteSequence, Item, Token, bare_string, values_equal


def test_token():
    token = Token('text/html')
    assert str(token) == 'text/html'
    assert repr(token) == "Token('text/html')"
    assert token == Token('text/html')
    assert token != 'text/html'
    assert len({token, Token('text/html')}) == 1


def test_byte_sequence():
    value = ByteSequence(b'spam')
    assert str(value) == 'c3BhbQ=='
    assert value == ByteSequence(b'spam')
    assert value != ByteSequence(b'ham')
    assert value != b'spam'


def test_item_defaults_params():
    item = Item('text/html')
    assert item.value == 'text/html'
    assert item.params == {}
    assert item == ('text/html', {})
    assert Item('text/html').params is not Item('text/html').params


@pytest.mark.parametrize('value, result', [
    ('utf-8', 'utf-8'),
    (2, '2'),
    (2.0, '2'),
    (0.5, '0.5'),
    (True, 'true'),
    (False, 'false'),
    (Token('html'), 'html'),
    (ByteSequence(b'spam'), 'c3BhbQ=='),
])
def test_bare_string(value, result):
    assert bare_string(value) == result


@pytest.mark.parametrize('a, b, result', [
    ('a', 'a', True),
    (1, 1.0, True),
    (1, '1', True),
    (True, True, True),
    (True, 'true', True),
    (True, 1, False),
    (False, 0, False),
    (Token('a'), 'a', True),
    (Token('a'), Token('a'), True),
    (ByteSequence(b'spam'), 'c3BhbQ==', True),
    ('a', 'A', False),
])
def test_values_equal(a, b, result):
    assert values_equal(a, b) is result
    assert values_equal(b, a) is result
