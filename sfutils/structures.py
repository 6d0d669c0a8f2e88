"""Bare item values of the HTTP structured fields model (RFC 8941).

Structured field parsers hand us items as a pair of a bare value and an ordered mapping of parameters. Bare values
are plain Python `str`, `int`, `float` and `bool` values, plus the two opaque wrappers defined here for tokens and
byte sequences.
"""
import base64
from collections import namedtuple


class Token:
    """An sf-token bare value, e.g. the `text/html` in `Accept: text/html`.

    Tokens compare equal only to other tokens; use `values_equal()` for the looser comparison used when matching
    media type parameters.
    """
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = str(value)

    def __repr__(self):
        return f'Token({self.value!r})'

    def __str__(self):
        return self.value

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((Token, self.value))


class ByteSequence:
    """An sf-binary bare value. Its string form is the base64 encoding used on the wire."""
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = bytes(value)

    def __repr__(self):
        return f'ByteSequence({self.value!r})'

    def __str__(self):
        return base64.b64encode(self.value).decode('ascii')

    def __eq__(self, other):
        if not isinstance(other, ByteSequence):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((ByteSequence, self.value))


class Item(namedtuple('Item', ['value', 'params'])):
    """A media type item: the bare value and its parameters.

    Any two element sequence of (value, params) is accepted wherever an item is expected; this is just a convenience
    that defaults the parameters to an empty dict.
    """
    __slots__ = ()

    def __new__(cls, value, params=None):
        return super().__new__(cls, value, {} if params is None else params)


def bare_string(value):
    """Return the string representation of a bare value.

    Booleans render as "true"/"false" and integral floats drop their fractional part, so that the parameter values
    `2`, `2.0` and `"2"` share a representation.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def values_equal(a, b):
    """Determine whether two bare values are the same parameter value.

    Native equality is tried first (a boolean is never equal to a number here, even though Python says True == 1),
    then the string representations are compared.
    """
    if isinstance(a, bool) == isinstance(b, bool) and a == b:
        return True
    return bare_string(a) == bare_string(b)
