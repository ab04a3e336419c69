"""
Entry points, one per statement kind. Each one validates the table name and
alias and returns a new chainable statement.
Example:
    from querysmith import select
    str(select('m_user', 'u').where(['a', 'like', 'teeee']))
        => SELECT * FROM m_user AS u WHERE a like 'teeee'
"""

from .delete import Delete
from .insert import Insert, InsertIgnore
from .query import Query
from .update import Update


def select(table, alias=None, validator=None):
    """Start a SELECT statement."""
    return Query(table, alias, validator)


def update(table, alias=None, validator=None):
    """Start an UPDATE statement."""
    return Update(table, alias, validator)


def insert(table, alias=None, validator=None):
    """Start an INSERT statement."""
    return Insert(table, alias, validator)


def insert_ignore(table, alias=None, validator=None):
    """Start an INSERT IGNORE statement."""
    return InsertIgnore(table, alias, validator)


def delete(table, alias=None, validator=None):
    """Start a DELETE statement."""
    return Delete(table, alias, validator)
