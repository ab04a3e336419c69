"""
Constants shared by the statement builders.
"""

WHERE_OP_AND = 'AND'
WHERE_OP_OR = 'OR'

ORDER_ASC = 'ASC'
ORDER_DESC = 'DESC'
ORDER_DIRECTIONS = (ORDER_ASC, ORDER_DESC)

STMT_SELECT = 'SELECT'
STMT_UPDATE = 'UPDATE'
STMT_DELETE = 'DELETE'
STMT_INSERT = 'INSERT'
STMT_INSERT_IGNORE = 'INSERT IGNORE'
STMT_REPLACE = 'REPLACE'
STMT_KINDS = (STMT_SELECT, STMT_UPDATE, STMT_DELETE, STMT_INSERT, STMT_INSERT_IGNORE, STMT_REPLACE)

JOIN_INNER = 'INNER JOIN'
JOIN_OUTER = 'OUTER JOIN'
JOIN_LEFT = 'LEFT JOIN'
JOIN_RIGHT = 'RIGHT JOIN'
JOIN_TYPES = (JOIN_INNER, JOIN_OUTER, JOIN_LEFT, JOIN_RIGHT)

AGG_AVG = 'AVG'
AGG_COUNT = 'COUNT'
AGG_MAX = 'MAX'
AGG_MIN = 'MIN'
AGG_SUM = 'SUM'
AGGREGATE_FUNCTIONS = (AGG_AVG, AGG_COUNT, AGG_MAX, AGG_MIN, AGG_SUM)

# MySQL accepts this as "all remaining rows" when only an offset is known
LIMIT_TO_END = 18446744073709551615
