"""
Define `Query` class for building SELECT statements. `Select` is only an alias to `Query`.
"""

from psycopg2 import sql

from .constants import STMT_SELECT
from .statement import Statement


class Query(Statement):
    """
    Builder for SELECT statement.
    Example:
        Query('m_user', 'u').columns('a,b').where('a', 'like', 'x').order_by('a', 'DESC')
            => SELECT a, b FROM m_user AS u WHERE a like 'x' ORDER BY A DESC
    Clause order:
        SELECT [SQL_CALC_FOUND_ROWS] [DISTINCT] columns [CASE] FROM table [JOIN]
        [WHERE] [GROUP BY] [HAVING] [ORDER BY] [LIMIT]
    """

    kind = STMT_SELECT

    def _on_build_query(self):
        parts = [
            self._build_query_select(),
            self._build_query_case(),
            sql.SQL('FROM ') + self._build_query_table(),
            self._build_query_join(),
            self._build_query_where(),
            self._build_query_group(),
            self._build_query_having(),
            self._build_query_order(),
            self._build_query_limit(),
        ]
        return sql.SQL(' ').join([p for p in parts if p is not None])

    def _build_query_select(self):
        prefix = [sql.SQL('SELECT')]
        if self._calc_found_rows:
            prefix.append(sql.SQL('SQL_CALC_FOUND_ROWS'))
        if self._distinct:
            prefix.append(sql.SQL('DISTINCT'))
        prefix.append(self._build_query_columns())
        return sql.SQL(' ').join(prefix)


Select = Query
