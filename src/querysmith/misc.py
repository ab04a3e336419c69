"""
The module declares the clause entry types and a few helpers:
 * `Predicate` - one WHERE condition with its connector to the next one
 * `Join` - ON tokens of a join paired with its rendered header
 * `Assignment` - a `field = literal` pair of a write statement
 * `flatten` - depth-first flattening of nested sequences
 * `split_expressions` - splits a comma-delimited list of SQL expressions
"""

from collections import namedtuple
from collections.abc import Mapping, Sequence

Predicate = namedtuple('Predicate', ['left', 'op', 'right', 'connector'])
Join = namedtuple('Join', ['on', 'header'])
Assignment = namedtuple('Assignment', ['field', 'value'])


def is_sequence(value):
    """Return True for lists, tuples and other non-string sequences."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def is_index_mapping(value: Mapping) -> bool:
    """Return True when the mapping keys are exactly 0..N-1 in order."""
    return list(value.keys()) == list(range(len(value)))


def flatten(items):
    """
    Flatten arbitrarily nested sequences into one stream, left to right.
    Strings are atoms. Flattening a flat sequence yields it unchanged.
    Usage example:
        list(flatten(['a', ['=', [1]], 'AND'])) => ['a', '=', 1, 'AND']
    :param items: a (possibly nested) sequence
    :return: generator of atoms
    """
    for item in items:
        if is_sequence(item):
            yield from flatten(item)
        else:
            yield item


def split_expressions(text):
    """
    Split `text` on commas which are not inside parentheses. The pieces are
    stripped and empty ones are dropped.
    Usage example:
        split_expressions('a, IF(b,1,0), c') => ['a', 'IF(b,1,0)', 'c']
    """
    pieces = []
    depth = 0
    current = []
    for char in text:
        if char == '(':
            depth += 1
        elif char == ')' and depth > 0:
            depth -= 1
        elif char == ',' and depth == 0:
            pieces.append(''.join(current))
            current = []
            continue
        current.append(char)
    pieces.append(''.join(current))
    return [piece.strip() for piece in pieces if piece.strip()]


def is_blank(value):
    """Empty slots: None, empty string, zero."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() in ('', '0')
    return value == 0
