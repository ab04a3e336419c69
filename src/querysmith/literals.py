"""
Value literal formatting. A value either looks numeric and is rendered bare,
or it is rendered as a single-quoted string with `\\` and `'` escaped.
Nothing else about the value's type is taken into account.
"""

import re
from decimal import Decimal

from .misc import is_sequence

_NUMERIC_RE = re.compile(r'\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*')


def is_numeric(value) -> bool:
    """
    Return True for numbers and for strings that read as a number.
    Usage examples:
        is_numeric(12) => True
        is_numeric(' 123 ') => True
        is_numeric('1e3') => True
        is_numeric('12a') => False
    """
    if isinstance(value, (bool, int, float, Decimal)):
        return True
    if isinstance(value, str):
        return _NUMERIC_RE.fullmatch(value) is not None
    return False


def escape_string(value: str) -> str:
    """Backslash-escape backslashes and single quotes."""
    return value.replace('\\', '\\\\').replace("'", "\\'")


def format_literal(value) -> str:
    """
    Render a scalar as SQL literal text.
    Usage examples:
        format_literal(1) => 1
        format_literal(' 123 ') => 123
        format_literal("O'Brien") => 'O\\'Brien'
        format_literal(None) => (empty text)
    :param value: the value to render
    :return: str
    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return '1' if value else '0'
    if is_numeric(value):
        return str(value).strip()
    value = str(value)
    if value == '':
        return ''
    return "'{}'".format(escape_string(value))


def format_operand(value) -> str:
    """
    Render the right operand of a predicate. Sequences become a parenthesized
    list for IN / NOT IN.
    Usage example:
        format_operand([1, 'a']) => (1,'a')
    """
    if is_sequence(value):
        return '({})'.format(','.join(format_literal(item) for item in value))
    return format_literal(value)


def quote_identifier(name: str) -> str:
    """Quote a field name with backticks."""
    return '`{}`'.format(str(name).strip().replace('`', '``'))


def format_assignment(value):
    """
    Render the value side of a `field = value` pair. Unlike `format_literal`,
    an empty string is kept as a quoted empty string. `None` has no literal
    and is returned as is.
        format_assignment('') => ''
        format_assignment(' 123 ') => 123
    """
    if value is None:
        return None
    if isinstance(value, str) and value.strip() == '':
        return "''"
    return format_literal(value.strip() if isinstance(value, str) else value)
