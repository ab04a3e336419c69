from querysmith import insert, insert_ignore, Insert, InsertIgnore, Replace, Statement
from tests.funcs import assert_query, make_validator


def test_inheritance():
    assert issubclass(Insert, Statement)
    assert issubclass(InsertIgnore, Insert)


def test_insert():
    cmd = insert('m_user').columns({'name': ' John ', 'age': 18, 'note': "it's"})
    assert_query(cmd, "INSERT INTO m_user (`name`,`age`,`note`) VALUES ('John',18,'it\\'s')")


def test_insert_batches():
    cmd = insert('m_user').columns({'a': 1}).columns({'b': 'x'})
    assert_query(cmd, "INSERT INTO m_user (`a`,`b`) VALUES (1,'x')")


def test_insert_ignore():
    cmd = insert_ignore('m_user').columns({'id': 1})
    assert_query(cmd, 'INSERT IGNORE INTO m_user (`id`) VALUES (1)')


def test_insert_alias_is_not_rendered():
    assert_query(insert('m_user', 'u').columns({'id': 1}), 'INSERT INTO m_user (`id`) VALUES (1)')


def test_insert_mismatch_is_empty():
    assert_query(insert('m_user'), '')
    assert_query(insert('m_user').columns('a,b'), '')
    assert_query(insert('m_user').columns({'a': 1}).columns('b'), '')
    assert_query(insert('m_user').columns({'a': None}), '')


def test_replace_is_empty():
    assert_query(Replace('m_user', validator=make_validator()).columns({'a': 1}), '')


def test_insert_empty_string_value():
    cmd = insert('m_user').columns({'name': '', 'age': 3})
    assert_query(cmd, "INSERT INTO m_user (`name`,`age`) VALUES ('',3)")
