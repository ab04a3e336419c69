"""SQL function shortcuts."""

import re

from .constants import AGGREGATE_FUNCTIONS

_CALL_RE = re.compile(r'\s*([A-Za-z_]\w*)\s*\((.*)\)\s*', re.DOTALL)


def aggregate(function, column):
    """
    Build an aggregate call text.
    Usage example:
        aggregate('AVG', 'u.age') => AVG(u.age)
    """
    return '{}({})'.format(function.upper(), str(column).strip())


def aggregate_name(expression):
    """
    Return the aggregate function called by `expression` or None when
    the expression is not an aggregate call.
    Usage examples:
        aggregate_name('count(id)') => 'COUNT'
        aggregate_name('concat(a, b)') => None
    """
    if not isinstance(expression, str):
        return None
    match = _CALL_RE.fullmatch(expression)
    if not match or match.group(1).upper() not in AGGREGATE_FUNCTIONS:
        return None
    return match.group(1).upper()


def normalize_aggregate(expression):
    """Upper-case the function name of an aggregate call, leave anything else as is."""
    name = aggregate_name(expression)
    if name is None:
        return expression
    match = _CALL_RE.fullmatch(expression)
    return '{}({})'.format(name, match.group(2))


def if_(*parts):
    """
    Build a MySQL `IF()` call.
    Usage example:
        if_("status='A'", 1, 0) => IF(status='A',1,0)
    """
    return 'IF({})'.format(','.join(str(part) for part in parts))
