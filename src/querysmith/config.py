"""
Runtime settings. Values are read from the environment, then from a `.env`
file in the working directory, with the defaults below. Nothing is read at
import time and the process environment is never modified.
"""

import os

from dotenv import dotenv_values, find_dotenv

DEFAULT_RESERVED_WORDS = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'reserved.txt')
DEFAULT_MAX_NAME_LENGTH = '64'
DEFAULT_MAX_ALIAS_LENGTH = '256'

_dotenv = None


def _get(key, default):
    global _dotenv
    if key in os.environ:
        return os.environ[key]
    if _dotenv is None:
        _dotenv = dotenv_values(find_dotenv(usecwd=True))
    value = _dotenv.get(key)
    return default if value is None else value


def reserved_words_path() -> str:
    return _get('QUERYSMITH_RESERVED_WORDS', DEFAULT_RESERVED_WORDS)


def max_name_length() -> int:
    return int(_get('QUERYSMITH_MAX_NAME_LENGTH', DEFAULT_MAX_NAME_LENGTH))


def max_alias_length() -> int:
    return int(_get('QUERYSMITH_MAX_ALIAS_LENGTH', DEFAULT_MAX_ALIAS_LENGTH))
