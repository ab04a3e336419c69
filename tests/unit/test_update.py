from querysmith import update, Update, Statement
from tests.funcs import assert_query


def test_inheritance():
    assert issubclass(Update, Statement)


def test_update():
    cmd = (
        update('m_user', 'u')
        .columns({'a': 'hello ', 'b': 'test ', 'c': ' 123 '})
        .where(['user_id', '=', 1])
    )
    assert_query(cmd, "UPDATE m_user SET a = 'hello', b = 'test', c = 123 WHERE user_id = 1")


def test_update_escaping_and_limit():
    cmd = (
        update('m_user')
        .columns({'name': "O'Brien", 'path': 'c:\\tmp'})
        .columns({'age': 42})
        .where('id', '=', 3)
        .set_limit(1)
    )
    assert_query(
        cmd,
        "UPDATE m_user SET name = 'O\\'Brien', path = 'c:\\\\tmp', age = 42 WHERE id = 3 LIMIT 1",
    )


def test_update_ignores_order_and_joins():
    cmd = update('m_user').columns({'a': 1}).order_by('a').group_by('a')
    assert_query(cmd, 'UPDATE m_user SET a = 1')


def test_update_without_columns_is_empty():
    assert_query(update('m_user').where('id', '=', 1), '')


def test_update_empty_and_null_values():
    cmd = update('m_user').columns({'name': ''}).where('id', '=', 1)
    assert_query(cmd, "UPDATE m_user SET name = '' WHERE id = 1")
    cmd = update('m_user').columns({'name': '  ', 'note': None})
    assert_query(cmd, "UPDATE m_user SET name = '', note = NULL")
