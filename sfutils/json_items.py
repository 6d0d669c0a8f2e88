"""Load media type items from JSON.

The JSON form is the one used by the HTTP WG structured field tests (https://github.com/httpwg/structured-field-tests):
a list of `[bare, params]` members where params is a list of `[name, value]` pairs. Tokens are written as
`{"__type": "token", "value": "text/html"}` and byte sequences as `{"__type": "binary", "value": "<base32>"}`.

For convenience params may also be a JSON object, and a member may be written as `{"value": ..., "params": ...}`.
"""
import base64
import binascii
import json
import logging

from .structures import ByteSequence, Item, Token


log = logging.getLogger(__name__)


class ItemFormatError(ValueError):
    pass


def load_bare(value):
    if isinstance(value, dict):
        kind = value.get('__type')
        if 'value' not in value:
            raise ItemFormatError(f'typed bare item is missing its value: {value!r}')
        if kind == 'token':
            return Token(value['value'])
        if kind == 'binary':
            try:
                return ByteSequence(base64.b32decode(value['value']))
            except (binascii.Error, TypeError, ValueError) as e:
                raise ItemFormatError(f'invalid base32 byte sequence {value["value"]!r}: {e}') from None
        raise ItemFormatError(f'unsupported bare item type {kind!r}')
    if isinstance(value, (str, int, float, bool)):
        return value
    raise ItemFormatError(f'invalid bare item {value!r}')


def load_params(params):
    if params is None:
        return {}
    if isinstance(params, dict):
        return {name: load_bare(value) for name, value in params.items()}
    if not isinstance(params, list):
        raise ItemFormatError(f'parameters must be a list or object, not {params!r}')
    result = {}
    for pair in params:
        if not isinstance(pair, list) or len(pair) != 2 or not isinstance(pair[0], str):
            raise ItemFormatError(f'invalid parameter {pair!r}')
        result[pair[0]] = load_bare(pair[1])
    return result


def load_item(member):
    if isinstance(member, dict) and '__type' not in member:
        if 'value' not in member:
            raise ItemFormatError(f'item is missing its value: {member!r}')
        return Item(load_bare(member['value']), load_params(member.get('params')))
    if isinstance(member, list):
        if len(member) != 2:
            raise ItemFormatError(f'item must be a [value, params] pair, not {member!r}')
        return Item(load_bare(member[0]), load_params(member[1]))
    # a lone bare value with no parameters
    return Item(load_bare(member))


def load_items(data):
    """Convert decoded JSON into a list of Items.

    A single member (not wrapped in a list) is returned as a list of one item.
    """
    if is_item_pair(data):
        log.debug(f'treating {data!r} as a single item')
        return [load_item(data)]
    if isinstance(data, list):
        return [load_item(member) for member in data]
    return [load_item(data)]


def is_bare(value):
    return isinstance(value, (str, int, float, bool)) or (isinstance(value, dict) and '__type' in value)


def is_item_pair(data):
    """Whether data is a lone `[bare, params]` member rather than a list of members."""
    if not isinstance(data, list) or len(data) != 2 or not is_bare(data[0]):
        return False
    params = data[1]
    if isinstance(params, dict):
        return 'value' not in params
    return isinstance(params, list) and all(
        isinstance(pair, list) and len(pair) == 2 and isinstance(pair[0], str) for pair in params)


def load_items_file(file):
    """Load items from a JSON file, given either a filename or an open file."""
    if hasattr(file, 'read'):
        return load_items(_decode(file))
    with open(file, encoding='utf-8') as f:
        return load_items(_decode(f))


def _decode(f):
    try:
        return json.load(f)
    except json.JSONDecodeError as e:
        raise ItemFormatError(f'invalid JSON: {e}') from None
    except UnicodeDecodeError as e:
        raise ItemFormatError(f'invalid UTF-8: {e}') from None
