"""
Implementation for UPDATE statement.
"""

import logging

from psycopg2 import sql

from .constants import STMT_UPDATE
from .statement import Statement

logger = logging.getLogger(__name__)


class Update(Statement):
    """
    Builder for UPDATE statement. The SET block comes from `columns` called with a
    mapping of field to value.
    Example:
        Update('m_user').columns({'a': 'hello ', 'c': ' 123 '}).where(['user_id', '=', 1])
            => UPDATE m_user SET a = 'hello', c = 123 WHERE user_id = 1
    Without any column the statement is incomplete and renders as empty text.
    """

    kind = STMT_UPDATE

    def _on_build_query(self):
        assignments = self._build_query_columns()
        if assignments is None:
            logger.warning('UPDATE %s has nothing to SET, rendering empty statement', self._table)
            return sql.SQL('')
        parts = [
            sql.SQL('UPDATE ') + self._build_query_table(),
            sql.SQL('SET ') + assignments,
            self._build_query_where(),
            self._build_query_limit(),
        ]
        return sql.SQL(' ').join([p for p in parts if p is not None])
