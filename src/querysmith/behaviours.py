"""
The module provides the clause behaviours mixed into statement builders:
 * `ColumnsBehaviour` - for the column list (and SET / VALUES data of write statements)
 * `CaseBehaviour` - for CASE ... END expressions
 * `WhereBehaviour` - for WHERE query block
 * `JoinBehaviour` - for JOIN ... ON query blocks
 * `GroupBehaviour` - for GROUP BY (and the HAVING placeholder)
 * `OrderBehaviour` - for ORDER BY query block
 * `LimitBehaviour` - for LIMIT query block
Each behaviour normalizes the call shapes it accepts into entries and renders
them on demand. Clause data only grows: nothing added can be removed.
"""

import itertools
import logging
from collections.abc import Mapping

from psycopg2 import sql

from . import funcs
from .constants import WHERE_OP_AND, WHERE_OP_OR, ORDER_ASC, ORDER_DIRECTIONS, STMT_SELECT,\
    JOIN_INNER, JOIN_LEFT, JOIN_OUTER, JOIN_RIGHT, JOIN_TYPES, AGG_AVG, AGG_COUNT, AGG_MAX,\
    AGG_MIN, AGG_SUM, LIMIT_TO_END
from .errors import ArgumentError, MissingArgumentError
from .literals import format_assignment, format_literal, format_operand
from .misc import Assignment, Join, Predicate, flatten, is_blank, is_index_mapping,\
    is_sequence, split_expressions

logger = logging.getLogger(__name__)


def _join_tokens(tokens):
    return ' '.join(str(token) for token in flatten(tokens) if token is not None and str(token) != '')


class ColumnsBehaviour:
    """
    Implements the column list. For SELECT the entries are output expressions,
    for write statements they are `field = literal` assignments.
    """

    def __init__(self, cmd):
        self._columns = []
        self._o = cmd

    def columns(self, column_data):
        """
        Adds a batch of columns.
        Usage examples:
        * Comma-separated string:
            columns('a, b') => SELECT a, b
        * Aggregate call:
            columns('count(id)') => SELECT COUNT(id)
        * List of columns:
            columns(['a', 'b']) => SELECT a, b
        * Aliases (SELECT). Keys are expressions, values are aliases:
            columns({'name': 'fullname', 'AVG(age)': 'avg_age'})
                => SELECT name AS fullname, AVG(age) AS avg_age
        * Assignments (UPDATE, INSERT). Values are trimmed and quoted unless numeric:
            columns({'a': 'hello ', 'c': ' 123 '}) => a = 'hello', c = 123
            update: columns({'a': None, 'b': ''}) => a = NULL, b = ''
        :param column_data: string, sequence or mapping
        :return: self
        """
        self._columns.append(self._parse_columns(column_data))
        return self

    def _parse_columns(self, column_data):
        if isinstance(column_data, str):
            return [funcs.normalize_aggregate(x) for x in split_expressions(column_data)]
        if isinstance(column_data, Mapping):
            if is_index_mapping(column_data):
                return self._parse_columns(list(column_data.values()))
            if self._o.kind == STMT_SELECT:
                return [
                    '{} AS {}'.format(funcs.normalize_aggregate(str(key).strip()), str(value).strip())
                    for key, value in column_data.items()
                ]
            return [
                Assignment(str(key).strip(), format_assignment(value))
                for key, value in column_data.items()
            ]
        if is_sequence(column_data):
            return [
                funcs.normalize_aggregate(str(x).strip()) for x in column_data if str(x).strip()
            ]
        raise ArgumentError('Unknown format of the column data: {!r}'.format(column_data))

    def avg(self, column, column_alias=None):
        """
        Adds `AVG(column)`, aliased when `column_alias` is given.
            avg('age', 'avg_age') => SELECT AVG(age) AS avg_age
        """
        return self._aggregate(AGG_AVG, column, column_alias)

    def column_count(self, column, column_alias=None):
        """Adds `COUNT(column)`, aliased when `column_alias` is given."""
        return self._aggregate(AGG_COUNT, column, column_alias)

    def max(self, column, column_alias=None):
        """Adds `MAX(column)`, aliased when `column_alias` is given."""
        return self._aggregate(AGG_MAX, column, column_alias)

    def min(self, column, column_alias=None):
        """Adds `MIN(column)`, aliased when `column_alias` is given."""
        return self._aggregate(AGG_MIN, column, column_alias)

    def sum(self, column, column_alias=None):
        """Adds `SUM(column)`, aliased when `column_alias` is given."""
        return self._aggregate(AGG_SUM, column, column_alias)

    def _aggregate(self, function, column, column_alias):
        expression = funcs.aggregate(function, column)
        if column_alias is None:
            return self.columns(expression)
        return self.columns({expression: column_alias})

    def if_(self, *expression):
        """
        Adds an `IF(...)` column. The parts may be passed positionally or as
        one sequence. With more than three parts the last one is the alias.
        Usage examples:
            if_("type='Income'", 'amount', 0)
                => SELECT IF(type='Income',amount,0)
            if_(["type='Income'", 'amount', 0, 'income'])
                => SELECT IF(type='Income',amount,0) AS income
        :return: self
        """
        if len(expression) == 1 and is_sequence(expression[0]):
            expression = expression[0]
        expression = list(expression)
        if len(expression) < 3:
            raise ArgumentError('IF() needs a condition and two results, got {!r}'.format(expression))
        column_alias = expression.pop() if len(expression) > 3 else None
        fragment = funcs.if_(*expression)
        if column_alias is None:
            return self.columns(fragment)
        return self.columns({fragment: column_alias})

    def column_entries(self):
        """Return all column entries in call order."""
        return list(itertools.chain.from_iterable(self._columns))

    def _build_query_columns(self):
        entries = self.column_entries()
        if not entries:
            return sql.SQL('*') if self._o.kind == STMT_SELECT else None
        return sql.SQL(', ').join([
            sql.SQL('{} = {}'.format(e.field, 'NULL' if e.value is None else e.value)
                    if isinstance(e, Assignment) else e)
            for e in entries
        ])


class CaseBehaviour:
    """
    Implements CASE expressions. Every `case` call adds one WHEN branch.
    """

    def __init__(self, cmd):
        self._when = []
        self._o = cmd

    def case(self, *expression):
        """
        Adds a WHEN branch. The first fragment is the column, the last one is the
        result (quoted unless numeric), anything between is the condition.
        Usage example:
            case('qty', '>', 30, 'many').case('qty', '<=', 30, 'few')
                => CASE (WHEN qty > 30 THEN 'many' WHEN qty <= 30 THEN 'few') END
        :return: self
        """
        if len(expression) == 1 and is_sequence(expression[0]):
            expression = expression[0]
        if len(expression) < 2:
            raise ArgumentError('CASE branch needs a column and a result, got {!r}'.format(expression))
        self._when.append(list(expression))
        return self

    def _build_query_case(self):
        if not self._when:
            return None
        branches = []
        for when in self._when:
            condition = _join_tokens(when[:-1])
            branches.append('WHEN {} THEN {}'.format(condition, format_literal(when[-1])))
        return sql.SQL('CASE ({}) END'.format(' '.join(branches)))


class WhereBehaviour:
    """
    Implementation of WHERE query block.
    """

    def __init__(self, cmd):
        self._wheres = []
        self._o = cmd

    def where(self, *expression):
        """
        Adds a condition. Every accepted shape is stored as
        (left, operator, right, connector); the connector joins the condition to
        the next one and defaults to AND.
        Usage examples:
            where('a', '=', 1)              => WHERE a = 1
            where(['a', '=', 1])            => WHERE a = 1
            where('a', 'like', 'x', 'OR').where(['b', '=', 2], 'AND')
                => WHERE a like 'x' OR b = 2
            where('id', 'IN', [1, 2, 3])   => WHERE id IN (1,2,3)
        :return: self
        """
        self._wheres.append(self._parse_where(expression))
        return self

    def and_where(self, expression):
        """Adds a [left, operator, right] condition joined to the next one with AND."""
        return self.where(expression, WHERE_OP_AND)

    def or_where(self, expression):
        """Adds a [left, operator, right] condition joined to the next one with OR."""
        return self.where(expression, WHERE_OP_OR)

    def and_wheres(self, expressions):
        """Calls `and_where` for every condition, in order."""
        for expression in expressions:
            self.and_where(expression)
        return self

    def or_wheres(self, expressions):
        """Calls `or_where` for every condition, in order."""
        for expression in expressions:
            self.or_where(expression)
        return self

    def _parse_where(self, expression):
        count = len(expression)
        if count == 1:
            left, op, right = self._unpack_predicate(expression[0])
            connector = WHERE_OP_AND
        elif count == 2:
            left, op, right = self._unpack_predicate(expression[0])
            connector = expression[1]
        elif count == 3:
            left, op, right = expression
            connector = WHERE_OP_AND
        elif count == 4:
            left, op, right, connector = expression
        else:
            raise ArgumentError('Unknown format of the where condition: {!r}'.format(expression))
        return Predicate(left, op, right, connector or WHERE_OP_AND)

    @staticmethod
    def _unpack_predicate(cond):
        if not is_sequence(cond) or len(cond) != 3:
            raise ArgumentError(
                'A where condition must be [left, operator, right], got {!r}'.format(cond))
        return tuple(cond)

    def predicates(self):
        """Return the stored conditions in call order."""
        return list(self._wheres)

    def _build_query_where(self):
        if not self._wheres:
            return None
        tokens = [[p.left, p.op, format_operand(p.right), p.connector] for p in self._wheres]
        # the last connector has nothing to join
        tokens[-1].pop()
        return sql.SQL('WHERE ') + sql.SQL(_join_tokens(tokens))


class JoinBehaviour:
    """
    Implementation of JOIN query blocks.
    """

    def __init__(self, cmd):
        self._joins = []
        self._o = cmd

    def join(self, table, expression, alias=None, join_type=JOIN_INNER, validator=None):
        """
        Adds a JOIN. The alias defaults to the first character of the table name.
        Usage examples:
            join('orders', ['u.id', '=', 'o.user_id'], 'o')
                => INNER JOIN o.orders ON u.id = o.user_id
            left_join('orders', 'u.id = o.user_id')
                => LEFT JOIN o.orders ON u.id = o.user_id
        :param table: joining table name
        :param expression: ON expression, a string or a list of tokens
        :param alias: joining table alias. Can be omitted
        :param join_type: JOIN_INNER, JOIN_OUTER, JOIN_LEFT or JOIN_RIGHT
        :param validator: checks the joined table and alias instead of the
            statement's validator. Can be omitted
        :raises MissingArgumentError: when the table or the expression is empty
        :raises IdentifierError: when the table or alias is not valid
        :return: self
        """
        if not isinstance(table, str) or not table.strip() or _is_empty(expression):
            raise MissingArgumentError('invalid arguments missing table name or expression')
        if join_type not in JOIN_TYPES:
            raise ArgumentError('Unknown join type {!r}'.format(join_type))
        table = table.strip()
        if isinstance(alias, str):
            alias = alias.strip()
        if alias is None or alias == '':
            alias = table[0]
        self._o.validate_identifier(table, alias, 'join', validator)
        header = '{} {}.{}'.format(join_type, alias, table)
        self._joins.append(Join(self._parse_on(expression), header))
        return self

    def inner_join(self, table, expression, alias=None, validator=None):
        return self.join(table, expression, alias, JOIN_INNER, validator)

    def left_join(self, table, expression, alias=None, validator=None):
        return self.join(table, expression, alias, JOIN_LEFT, validator)

    def outer_join(self, table, expression, alias=None, validator=None):
        return self.join(table, expression, alias, JOIN_OUTER, validator)

    def right_join(self, table, expression, alias=None, validator=None):
        return self.join(table, expression, alias, JOIN_RIGHT, validator)

    def on(self, expression, connector=None):
        """
        Appends ON tokens to the most recently added join. The connector, when
        given, goes before the new tokens.
        Usage example:
            join('orders', ['u.id', '=', 'o.user_id'], 'o').on(['o.state', '=', 1], 'AND')
                => INNER JOIN o.orders ON u.id = o.user_id AND o.state = 1
        :return: self
        """
        if _is_empty(expression):
            raise MissingArgumentError('invalid arguments missing ON expression')
        if not self._joins:
            raise ArgumentError('ON expression needs a join to attach to')
        tokens = self._joins[-1].on
        if connector:
            tokens.append(connector)
        tokens.extend(self._parse_on(expression))
        return self

    def and_on(self, expression):
        return self.on(expression, WHERE_OP_AND)

    def or_on(self, expression):
        return self.on(expression, WHERE_OP_OR)

    @staticmethod
    def _parse_on(expression):
        if isinstance(expression, str):
            return [expression.strip()]
        if is_sequence(expression):
            return list(expression)
        return [expression]

    def _build_query_join(self):
        if not self._joins:
            return None
        return sql.SQL(' ').join([
            sql.SQL('{} ON {}'.format(j.header, _join_tokens(j.on))) for j in self._joins
        ])


def _is_empty(expression):
    if expression is None:
        return True
    if isinstance(expression, str):
        return not expression.strip()
    if is_sequence(expression):
        return len(expression) == 0
    return False


class GroupBehaviour:
    """
    Implementation of GROUP BY query block. HAVING is accepted and ignored.
    """

    def __init__(self, cmd):
        self._group_by = []
        self._o = cmd

    def group_by(self, *expression):
        """
        Adds GROUP BY expressions.
        Usage examples:
            group_by('a, b') => GROUP BY a, b
            group_by('a', 'b') => GROUP BY a, b
            group_by(['a', 'b']) => GROUP BY a, b
        :return: self
        """
        batch = []
        for item in expression:
            if isinstance(item, str):
                batch.extend(split_expressions(item))
            elif is_sequence(item):
                batch.extend(str(x).strip() for x in flatten(item) if str(x).strip())
            elif item is not None:
                batch.append(str(item))
        if batch:
            self._group_by.append(batch)
        return self

    def having(self, *expression):
        """HAVING is not supported: the call is accepted and renders nothing."""
        logger.debug('HAVING is not supported, ignoring %r', expression)
        return self

    def _build_query_group(self):
        if not self._group_by:
            return None
        return sql.SQL('GROUP BY ') + sql.SQL(', ').join([
            sql.SQL(x) for x in itertools.chain.from_iterable(self._group_by)
        ])

    # pylint: disable=R0201
    def _build_query_having(self):
        return None


class OrderBehaviour:
    """
    Implementation of ORDER BY query block.
    """

    def __init__(self, cmd):
        self._order_by = []
        self._o = cmd

    def order_by(self, *expression):
        """
        Adds ORDER BY entries. Columns are upper-cased; any direction other than
        ASC or DESC falls back to ASC.
        Usage examples:
        * Single column, default direction:
            order_by('a') => ORDER BY A ASC
        * Comma-separated columns with a direction:
            order_by('a,b', 'DESC') => ORDER BY A DESC, B DESC
        * List of columns:
            order_by(['a'], 'DESC') => ORDER BY A DESC
        * Mapping of column to direction:
            order_by({'a': 'DESC', 'b': 'ASC'}) => ORDER BY A DESC, B ASC
        :return: self
        """
        if not expression or len(expression) > 2:
            raise ArgumentError('order_by expects an expression and an optional direction')
        direction = expression[1] if len(expression) == 2 else ORDER_ASC
        fields = expression[0]
        if isinstance(fields, str):
            if ',' in fields:
                fields = split_expressions(fields)
            else:
                fields = {fields.strip(): direction}
        elif isinstance(fields, Mapping) and is_index_mapping(fields):
            fields = list(fields.values())
        if is_sequence(fields):
            fields = dict.fromkeys((str(x).strip() for x in fields), direction)
        elif not isinstance(fields, Mapping):
            raise ArgumentError('Unknown format of the order expression: {!r}'.format(fields))
        for key, value in fields.items():
            if value not in ORDER_DIRECTIONS:
                value = ORDER_ASC
            self._order_by.append('{} {}'.format(str(key).upper(), value))
        return self

    def _build_query_order(self):
        if not self._order_by:
            return None
        return sql.SQL('ORDER BY ') + sql.SQL(', ').join([sql.SQL(x) for x in self._order_by])


class LimitBehaviour:
    """
    Implementation of LIMIT query block.
    """

    def __init__(self, cmd):
        self._offset = None
        self._limit = None
        self._o = cmd

    def offset_limits(self, offset, limit):
        """
        Sets both offset and limit.
            offset_limits(20, 10) => LIMIT 20, 10
        """
        self._offset = offset
        self._limit = limit
        return self

    def set_offset(self, offset):
        self._offset = offset
        return self

    def set_limit(self, limit):
        self._limit = limit
        return self

    def _build_query_limit(self):
        offset = None if is_blank(self._offset) else str(self._offset).strip()
        limit = None if is_blank(self._limit) else str(self._limit).strip()
        if offset is None and limit is None:
            return None
        if limit is None:
            limit = str(LIMIT_TO_END)
        text = limit if offset is None else '{}, {}'.format(offset, limit)
        return sql.SQL('LIMIT ') + sql.SQL(text)
