"""
Identifier validation. Table and join names are checked against length
limits and against a reserved-word list before a builder accepts them.
"""

import logging
import os
import threading
from collections import namedtuple

from . import config

logger = logging.getLogger(__name__)

ValidationResult = namedtuple('ValidationResult', ['valid', 'errors'])


class ReservedWords:
    """
    Case-insensitive, read-only set of reserved words.
    Example:
        words = ReservedWords(['select', 'TABLE'])
        'Select' in words => True
    """

    def __init__(self, words=()):
        self._words = frozenset(word.strip().upper() for word in words if word.strip())

    @classmethod
    def from_file(cls, path):
        """
        Load words from a text file, one per line. Blank lines and lines
        starting with `#` are skipped. A missing file gives an empty set.
        :param path: path to the word list
        :return: ReservedWords
        """
        if not os.path.isfile(path):
            logger.warning('Reserved word list %s not found, reserved word checks are disabled', path)
            return cls()
        with open(path, encoding='utf-8') as fh:
            words = [line for line in fh if not line.lstrip().startswith('#')]
        res = cls(words)
        logger.debug('Loaded %d reserved words from %s', len(res), path)
        return res

    def __contains__(self, word):
        return isinstance(word, str) and word.strip().upper() in self._words

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(sorted(self._words))


class IdentifierValidator:
    """
    Checks a table name and its alias.
    Usage example:
        validator = IdentifierValidator(ReservedWords(['order']))
        validator.validate('order', 'o')
            => ValidationResult(valid=False, errors=['Table name, order, is a reserved word'])
    """

    def __init__(self, reserved_words=None, max_name_length=None, max_alias_length=None):
        self.reserved_words = reserved_words if reserved_words is not None else ReservedWords()
        self.max_name_length = max_name_length if max_name_length is not None \
            else config.max_name_length()
        self.max_alias_length = max_alias_length if max_alias_length is not None \
            else config.max_alias_length()

    def validate(self, name, alias=None) -> ValidationResult:
        """
        Validate `name` and `alias`. The alias and reserved word checks run only
        when the previous checks passed.
        :param name: table name
        :param alias: table alias. Can be omitted
        :return: ValidationResult
        """
        if name is not None and not isinstance(name, str):
            return self._rejected(['Table name, {!r}, must be a string'.format(name)])
        errors = []
        name = (name or '').strip()
        if not name:
            errors.append('Table name, can not be empty.')
        elif len(name) > self.max_name_length:
            errors.append('Table name, {}, too lengthy'.format(name))

        if not errors and alias is not None and not isinstance(alias, str):
            errors.append('Table alias, {!r}, must be a string'.format(alias))
        elif not errors and alias and len(alias) > self.max_alias_length:
            errors.append('Table alias, {}, too lengthy'.format(alias))

        if not errors and name in self.reserved_words:
            errors.append('Table name, {}, is a reserved word'.format(name))

        if errors:
            return self._rejected(errors)
        return ValidationResult(valid=True, errors=errors)

    @staticmethod
    def _rejected(errors):
        logger.warning('Identifier rejected: %s', ', '.join(errors))
        return ValidationResult(valid=False, errors=errors)


_default_reserved_words = None
_default_validator = None
_lock = threading.Lock()


def default_reserved_words() -> ReservedWords:
    """Return the process-wide reserved word list, loading it on first use."""
    global _default_reserved_words
    if _default_reserved_words is None:
        with _lock:
            if _default_reserved_words is None:
                _default_reserved_words = ReservedWords.from_file(config.reserved_words_path())
    return _default_reserved_words


def default_validator() -> IdentifierValidator:
    """Return the validator used when a builder is not given one."""
    global _default_validator
    if _default_validator is None:
        words = default_reserved_words()
        with _lock:
            if _default_validator is None:
                _default_validator = IdentifierValidator(words)
    return _default_validator
