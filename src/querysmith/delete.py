"""
The module includes:
 - class `Delete` - builder for the DELETE statement
"""

from psycopg2 import sql

from .constants import STMT_DELETE
from .statement import Statement


class Delete(Statement):
    """
    Builder for DELETE statement.
    Example:
        Delete('m_user').where('user_id', '=', 7).set_limit(1)
            => DELETE FROM m_user WHERE user_id = 7 LIMIT 1
    """

    kind = STMT_DELETE

    def _on_build_query(self):
        parts = [
            sql.SQL('DELETE FROM ') + self._build_query_table(),
            self._build_query_where(),
            self._build_query_limit(),
        ]
        return sql.SQL(' ').join([p for p in parts if p is not None])
