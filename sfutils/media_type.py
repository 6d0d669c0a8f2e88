"""Sort and match HTTP media types in the structured fields format as described in RFC 9110:

https://www.rfc-editor.org/rfc/rfc9110#name-accept

Items are (bare value, parameters) pairs as produced by a structured field parser, for example the list members of
a parsed `Accept` header.
"""
import logging
import math
import numbers
import re
from functools import cmp_to_key

from .structures import bare_string, values_equal


log = logging.getLogger(__name__)

TOKEN = r"[-a-zA-Z0-9!#$%^&*_+{}|'.`~]+"
MEDIA_TYPE = re.compile(f'({TOKEN})/({TOKEN})', re.IGNORECASE)

MAX_QUALITY = 1000


def split(media_type):
    """Split a media type string or token into its lowercased type and subtype.

    Returns None if the value is not a single type/subtype pair.
    """
    match = MEDIA_TYPE.fullmatch(bare_string(media_type))
    if match is None:
        return None
    return match.group(1).lower(), match.group(2).lower()


def sort(types):
    """Sort media type items by preference according to RFC 9110.

    Higher quality sorts first, then the more specific type/subtype, then the item with more parameters (other than
    `q`). For example the items parsed from::

        text/html;level=3;q=0.7, text/html;q=0.7, text/plain;q=0.5, text/*;q=0.1

    come back in that same order.

    A new list is returned. Items that compare equal at every step are not promised to keep their input order.
    """
    return sorted(types, key=cmp_to_key(comparator))


def comparator(a, b):
    """Compare the priority of two media type items; negative if `a` should come first."""
    return (sort_by_quality(a[1].get('q'), b[1].get('q'))
            or sort_by_type(a[0], b[0])
            or sort_by_parameters(a[1], b[1]))


def sort_by_quality(a, b):
    return extract_quality(b) - extract_quality(a)


def extract_quality(q):
    """Convert a `q` parameter value to an integer weight from 0 to 1000.

    A missing value (None) is the maximum weight. Values are truncated, not rounded, so 0.9999 weighs 999. Anything
    that is not a number in the range (0, 1] weighs 0.
    """
    if q is None:
        return MAX_QUALITY
    if isinstance(q, numbers.Real) and not isinstance(q, bool):
        q_num = q
    else:
        try:
            q_num = float(bare_string(q))
        except ValueError:
            return 0
    if q_num == 1:
        return MAX_QUALITY
    if 0 < q_num < 1:
        return math.floor(q_num * MAX_QUALITY)
    return 0


def sort_by_type(a, b):
    """Compare the specificity of two media types: */* sorts after type/* which sorts after type/subtype."""
    a_type, a_subtype = split(a) or (None, None)
    b_type, b_subtype = split(b) or (None, None)
    # RFC 9110 does not order by structured syntax suffix (+json etc.) so neither do we
    if a_type == b_type and a_subtype == b_subtype:
        return 0
    if a_type == '*' and a_subtype == '*':
        return 1
    if b_type == '*' and b_subtype == '*':
        return -1
    if a_subtype == '*' and b_subtype == '*':
        return 0
    if a_subtype == '*':
        return 1
    if b_subtype == '*':
        return -1
    return 0


def sort_by_parameters(a, b):
    return count_parameters(b) - count_parameters(a)


def count_parameters(params):
    """Count the parameters, not including `q`."""
    return len(params) - (1 if 'q' in params else 0)


def match(requested, allowed):
    """Determine whether the requested media type item is satisfied by the allowed one.

    Wildcards (`*/*` or `type/*`) are honoured on the requested side only. If the types match and every requested
    parameter (other than `q`) exists on the allowed item but some values differ, a dict of those parameters with
    their requested values is returned. Otherwise the result is True or False.
    """
    requested_type = split(requested[0])
    allowed_type = split(allowed[0])
    if requested_type is None or allowed_type is None:
        log.warning(f'invalid media type in match of {requested[0]!r} against {allowed[0]!r}')
        return False
    req_type, req_subtype = requested_type
    type_, subtype = allowed_type
    if req_type != '*' and req_type != type_:
        log.debug(f'type {req_type!r} does not match {type_!r}')
        return False
    if req_subtype != '*' and req_subtype != subtype:
        log.debug(f'subtype {req_subtype!r} does not match {subtype!r}')
        return False
    return contains(requested[1], allowed[1])


def contains(requested, allowed):
    """Check that the requested parameters exist on, and have the same values as, the allowed parameters.

    The `q` parameter is ignored. A requested parameter missing from the allowed parameters fails the check outright
    (returns False); otherwise the parameters whose values differ are returned, or True if there are none.
    """
    mismatched = {}
    for key, value in requested.items():
        if key == 'q':
            continue
        if key not in allowed:
            log.debug(f'parameter {key!r} is not allowed')
            return False
        if not values_equal(value, allowed[key]):
            log.debug(f'parameter {key!r} value {value!r} does not equal {allowed[key]!r}')
            mismatched[key] = value
    return mismatched or True


def negotiate(accepted, available):
    """Pick the available media type item preferred by the accepted media type items.

    Each available item takes its quality from the most specific accepted range that fully matches it (RFC 9110
    section 12.5.1), so `text/html;q=0, */*` refuses text/html. Items with a quality of zero are not acceptable. The
    highest quality item is returned, the earliest in `available` on a tie, or None if no item is acceptable.
    """
    best, best_quality = None, 0
    for candidate in available:
        media_range = most_specific_range(accepted, candidate)
        if media_range is None:
            continue
        quality = extract_quality(media_range[1].get('q'))
        log.debug(f'{candidate[0]!r} has quality {quality} from {media_range[0]!r}')
        if quality > best_quality:
            best, best_quality = candidate, quality
    return best


def most_specific_range(accepted, candidate):
    """Return the most specific accepted range that fully matches the candidate, or None."""
    ranges = []
    for media_range in accepted:
        result = match(media_range, candidate)
        if result is True:
            ranges.append(media_range)
        elif result:
            log.debug(f'{candidate[0]!r} has mismatched parameters {result}')
    if not ranges:
        return None
    return min(ranges, key=cmp_to_key(specificity))


def specificity(a, b):
    return sort_by_type(a[0], b[0]) or sort_by_parameters(a[1], b[1])
