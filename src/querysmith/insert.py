"""
Classes `Insert` and `InsertIgnore` for building INSERT statements, plus the
`Replace` placeholder.
"""

import logging

from psycopg2 import sql

from .constants import STMT_INSERT, STMT_INSERT_IGNORE, STMT_REPLACE
from .literals import quote_identifier
from .misc import Assignment
from .statement import Statement

logger = logging.getLogger(__name__)


class Insert(Statement):
    """
    Builder for INSERT statement. Field/value pairs come from `columns` called
    with a mapping.
    Example:
        Insert('m_user').columns({'name': 'John', 'age': 18})
            => INSERT INTO m_user (`name`,`age`) VALUES ('John',18)
    Every column needs a value: when a field is None (or there are no fields
    at all) the statement renders as empty text. An empty string is a value.
    """

    kind = STMT_INSERT

    def _on_build_query(self):
        entries = self.column_entries()
        complete = all(isinstance(e, Assignment) and e.value is not None for e in entries)
        if not entries or not complete:
            logger.warning('%s INTO %s dropped: fields and values do not match',
                           self.kind, self._table)
            return sql.SQL('')
        fields = ','.join(quote_identifier(e.field) for e in entries)
        values = ','.join(e.value for e in entries)
        return (
            sql.SQL('{} INTO '.format(self.kind))
            + self._build_query_table()
            + sql.SQL(' ({}) VALUES ({})'.format(fields, values))
        )


class InsertIgnore(Insert):
    """
    Builder for INSERT IGNORE statement.
        InsertIgnore('m_user').columns({'id': 1}) => INSERT IGNORE INTO m_user (`id`) VALUES (1)
    """

    kind = STMT_INSERT_IGNORE


class Replace(Statement):
    """
    REPLACE is not implemented: the statement always renders as empty text.
    """

    kind = STMT_REPLACE

    def _on_build_query(self):
        logger.warning('REPLACE is not supported, rendering empty statement for %s', self._table)
        return sql.SQL('')
