import importlib
import os
import threading

import pytest

from querysmith import select, update, insert, insert_ignore, delete, config, validation
from querysmith.errors import IdentifierError
from querysmith.validation import IdentifierValidator, ReservedWords
from tests.funcs import make_validator, write_words


def test_reserved_words_are_case_insensitive():
    words = ReservedWords(['select', ' Table '])
    assert 'SELECT' in words
    assert 'table' in words
    assert 'm_user' not in words
    assert len(words) == 2


def test_reserved_words_from_file(tmp_path):
    path = write_words(tmp_path, ['# comment', 'ORDER', '', 'group'])
    words = ReservedWords.from_file(path)
    assert len(words) == 2
    assert 'order' in words
    assert 'GROUP' in words


def test_reserved_words_missing_file(tmp_path):
    words = ReservedWords.from_file(str(tmp_path / 'missing.txt'))
    assert len(words) == 0


def test_validate():
    validator = make_validator(['order'], max_name_length=8, max_alias_length=4)
    assert validator.validate('m_user', 'u') == (True, [])
    assert validator.validate('') == (False, ['Table name, can not be empty.'])
    assert validator.validate('   ') == (False, ['Table name, can not be empty.'])
    assert validator.validate('very_long_name') == (False, ['Table name, very_long_name, too lengthy'])
    assert validator.validate('m_user', 'alias') == (False, ['Table alias, alias, too lengthy'])
    assert validator.validate('Order') == (False, ['Table name, Order, is a reserved word'])


def test_validate_stops_at_first_failure():
    validator = make_validator(['order'], max_name_length=3, max_alias_length=1)
    res = validator.validate('order', 'oo')
    assert res.errors == ['Table name, order, too lengthy']


def test_default_limits():
    validator = IdentifierValidator()
    assert validator.max_name_length == config.max_name_length() == 64
    assert validator.max_alias_length == config.max_alias_length() == 256
    assert validator.validate('x' * 64).valid
    assert not validator.validate('x' * 65).valid


@pytest.mark.parametrize('factory', [select, update, insert, insert_ignore, delete])
def test_constructors_validate(factory):
    with pytest.raises(IdentifierError) as ei:
        factory('select')
    assert ei.value.errors == ['Table name, select, is a reserved word']
    with pytest.raises(IdentifierError):
        factory('')
    assert factory('m_user').table == 'm_user'


def test_error_message_names_the_call():
    with pytest.raises(IdentifierError, match=r'^insert_ignore\(\): Table name, can not be empty\.$'):
        insert_ignore('  ')


def test_injected_validator():
    validator = make_validator(['m_user'])
    with pytest.raises(IdentifierError):
        select('m_user', validator=validator)
    assert select('select', validator=make_validator()).as_string() == 'SELECT * FROM select'


def test_default_reserved_words_load_once(monkeypatch, tmp_path):
    path = write_words(tmp_path, ['FOO'])
    monkeypatch.setenv('QUERYSMITH_RESERVED_WORDS', path)
    monkeypatch.setattr(validation, '_default_reserved_words', None)
    monkeypatch.setattr(validation, '_default_validator', None)
    calls = []
    original = ReservedWords.from_file.__func__

    def counting_from_file(cls, p):
        calls.append(p)
        return original(cls, p)

    monkeypatch.setattr(ReservedWords, 'from_file', classmethod(counting_from_file))
    results = []
    threads = [
        threading.Thread(target=lambda: results.append(validation.default_reserved_words()))
        for _ in range(8)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert calls == [path]
    assert all(r is results[0] for r in results)
    assert 'foo' in results[0]
    assert validation.default_validator() is validation.default_validator()
    assert validation.default_validator().reserved_words is results[0]


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv('QUERYSMITH_MAX_NAME_LENGTH', '10')
    monkeypatch.setenv('QUERYSMITH_RESERVED_WORDS', '/tmp/words.txt')
    monkeypatch.delenv('QUERYSMITH_MAX_ALIAS_LENGTH', raising=False)
    assert config.max_name_length() == 10
    assert config.reserved_words_path() == '/tmp/words.txt'
    assert config.max_alias_length() == 256
    assert IdentifierValidator().max_name_length == 10


def test_config_from_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, '_dotenv', None)
    monkeypatch.delenv('QUERYSMITH_MAX_ALIAS_LENGTH', raising=False)
    monkeypatch.setenv('QUERYSMITH_MAX_NAME_LENGTH', '10')
    (tmp_path / '.env').write_text(
        'QUERYSMITH_MAX_ALIAS_LENGTH=12\nQUERYSMITH_MAX_NAME_LENGTH=99\n', encoding='utf-8'
    )
    assert config.max_alias_length() == 12
    assert config.max_name_length() == 10
    assert 'QUERYSMITH_MAX_ALIAS_LENGTH' not in os.environ


def test_importing_does_not_touch_environment(monkeypatch, tmp_path):
    (tmp_path / '.env').write_text('QUERYSMITH_RESERVED_WORDS=/tmp/other.txt\n', encoding='utf-8')
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('QUERYSMITH_RESERVED_WORDS', raising=False)
    importlib.reload(config)
    assert config._dotenv is None
    assert 'QUERYSMITH_RESERVED_WORDS' not in os.environ
    assert config.reserved_words_path() == '/tmp/other.txt'
    config._dotenv = None


@pytest.mark.parametrize('name, alias, error', [
    (123, None, 'Table name, 123, must be a string'),
    ('m_user', 5, 'Table alias, 5, must be a string'),
])
def test_non_string_identifiers(name, alias, error):
    assert make_validator().validate(name, alias) == (False, [error])
    with pytest.raises(IdentifierError) as ei:
        select(name, alias)
    assert ei.value.errors == [error]


def test_join_alias_must_be_a_string():
    with pytest.raises(IdentifierError) as ei:
        select('m_user', validator=make_validator()).join('orders', 'a = b', 5)
    assert ei.value.errors == ['Table alias, 5, must be a string']
