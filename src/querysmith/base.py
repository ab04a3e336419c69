"""
Defines `BaseStatement`, the base type for every statement builder.
"""

from psycopg2 import sql

from .constants import STMT_SELECT
from .errors import IdentifierError
from .validation import default_validator


class BaseStatement:
    """
    The base class for all statement builders. It keeps the target table and
    the statement kind, and turns the built query into text.
    """

    kind = STMT_SELECT

    def __init__(self, table, alias=None, validator=None):
        """
        Create a new statement for `table`. The table name and alias are checked
        by `validator` (the process-wide default when omitted).
        :raises IdentifierError: when the validator rejects the identifiers
        """
        self.validator = validator if validator is not None else default_validator()
        self.validate_identifier(table, alias, self.kind.lower().replace(' ', '_'))
        self._table = table.strip()
        self._alias = alias.strip() if alias else None

    @property
    def table(self):
        return self._table

    @property
    def alias(self):
        return self._alias

    def validate_identifier(self, name, alias=None, method=None, validator=None):
        """Run `validator` (the statement's own when omitted) and raise `IdentifierError` on failure."""
        res = (validator if validator is not None else self.validator).validate(name, alias)
        if not res.valid:
            raise IdentifierError(res.errors, method)

    def build_query(self) -> sql.Composable:
        """
        Build the statement. The result can be passed to a psycopg2 cursor or
        rendered with `as_string`. Building never raises: clauses which can't be
        rendered are left out, and an incomplete statement builds to empty text.
        :return: sql.Composable
        """
        return self._on_build_query()

    def _on_build_query(self):
        return sql.SQL('')

    def as_string(self):
        """
        Return the statement as raw SQL text
        :return: str
        """
        # Only sql.SQL fragments are composed, so no connection is needed
        return self.build_query().as_string(None)

    def _build_query_table(self):
        if self.kind == STMT_SELECT and self._alias:
            return sql.SQL('{} AS {}'.format(self._table, self._alias))
        return sql.SQL(self._table)

    def __str__(self):
        return self.as_string()

    def __repr__(self):
        return '<{} {!r}>'.format(type(self).__name__, self.as_string())
