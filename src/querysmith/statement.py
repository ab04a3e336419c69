"""
Defines `Statement`, the fluent façade shared by every statement kind. It owns
the clause state of one statement; each kind decides which clauses it renders.
"""

from .base import BaseStatement
from .behaviours import ColumnsBehaviour, CaseBehaviour, WhereBehaviour, JoinBehaviour,\
    GroupBehaviour, OrderBehaviour, LimitBehaviour


class Statement(BaseStatement, ColumnsBehaviour, CaseBehaviour, WhereBehaviour, JoinBehaviour,
                GroupBehaviour, OrderBehaviour, LimitBehaviour):
    """
    Chainable statement builder. Every mutator returns the statement itself and
    only appends to the clause state; nothing is rendered until `as_string`
    (or `str()`) is called.
    A statement is a private, sequentially built value: don't share one between
    threads without a lock.
    """

    def __init__(self, table, alias=None, validator=None):
        super().__init__(table, alias, validator)
        ColumnsBehaviour.__init__(self, self)
        CaseBehaviour.__init__(self, self)
        WhereBehaviour.__init__(self, self)
        JoinBehaviour.__init__(self, self)
        GroupBehaviour.__init__(self, self)
        OrderBehaviour.__init__(self, self)
        LimitBehaviour.__init__(self, self)
        self._distinct = False
        self._calc_found_rows = False

    def distinct(self, _distinct=True):
        """
        Set DISTINCT mode.
        :param _distinct: a boolean. If True distinct mode will be on, otherwise off
        :return: self
        """
        self._distinct = _distinct
        return self

    def calc_found_rows(self, _calc_found_rows=True):
        """
        Add SQL_CALC_FOUND_ROWS to the SELECT.
        :param _calc_found_rows: a boolean
        :return: self
        """
        self._calc_found_rows = _calc_found_rows
        return self
