"""
querysmith assembles MySQL statements from fluent calls:

    from querysmith import select, update

    select('m_user', 'u').columns('a,b').where('a', 'like', 'x')
        => SELECT a, b FROM m_user AS u WHERE a like 'x'
    update('m_user').columns({'a': 'hello'}).where(['user_id', '=', 1])
        => UPDATE m_user SET a = 'hello' WHERE user_id = 1

Values are escaped as literals only; nothing is parameterized or executed.
"""

import logging

from .builder import select, update, insert, insert_ignore, delete
from .constants import WHERE_OP_AND, WHERE_OP_OR, ORDER_ASC, ORDER_DESC, JOIN_INNER,\
    JOIN_OUTER, JOIN_LEFT, JOIN_RIGHT
from .delete import Delete
from .errors import Error, ArgumentError, MissingArgumentError, IdentifierError
from .insert import Insert, InsertIgnore, Replace
from .literals import format_literal
from .misc import flatten
from .query import Query, Select
from .statement import Statement
from .update import Update
from .validation import IdentifierValidator, ReservedWords, ValidationResult,\
    default_validator, default_reserved_words

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'select', 'update', 'insert', 'insert_ignore', 'delete',
    'Statement', 'Query', 'Select', 'Update', 'Insert', 'InsertIgnore', 'Replace', 'Delete',
    'Error', 'ArgumentError', 'MissingArgumentError', 'IdentifierError',
    'IdentifierValidator', 'ReservedWords', 'ValidationResult',
    'default_validator', 'default_reserved_words',
    'format_literal', 'flatten',
    'WHERE_OP_AND', 'WHERE_OP_OR', 'ORDER_ASC', 'ORDER_DESC',
    'JOIN_INNER', 'JOIN_OUTER', 'JOIN_LEFT', 'JOIN_RIGHT',
]
