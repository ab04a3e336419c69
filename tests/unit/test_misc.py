from querysmith import flatten
from querysmith.funcs import aggregate, aggregate_name, normalize_aggregate, if_
from querysmith.misc import split_expressions, is_blank, is_index_mapping


def test_flatten():
    assert list(flatten(['a', ['=', [1, [2, ('b',)]]], 'AND'])) == ['a', '=', 1, 2, 'b', 'AND']
    assert list(flatten([])) == []
    assert list(flatten([[[]]])) == []


def test_flatten_is_idempotent():
    flat = ['a', '=', 1, 'AND', 'b']
    assert list(flatten(flat)) == flat
    nested = [['a', ['=']], [[1]]]
    once = list(flatten(nested))
    assert list(flatten(once)) == once


def test_flatten_keeps_strings_whole():
    assert list(flatten(['abc', ['de']])) == ['abc', 'de']


def test_split_expressions():
    assert split_expressions('a,b') == ['a', 'b']
    assert split_expressions(' a , b ,, ') == ['a', 'b']
    assert split_expressions("IF(a=1,'x','y'), COUNT(id)") == ["IF(a=1,'x','y')", 'COUNT(id)']


def test_is_blank():
    for value in [None, '', ' ', 0, '0']:
        assert is_blank(value)
    for value in [1, '5', 'x']:
        assert not is_blank(value)


def test_is_index_mapping():
    assert is_index_mapping({0: 'a', 1: 'b'})
    assert is_index_mapping({})
    assert not is_index_mapping({1: 'a'})
    assert not is_index_mapping({'a': 1})


def test_aggregate_helpers():
    assert aggregate('avg', ' age ') == 'AVG(age)'
    assert aggregate_name('count(id)') == 'COUNT'
    assert aggregate_name('concat(a, b)') is None
    assert aggregate_name('name') is None
    assert normalize_aggregate('sum(x)') == 'SUM(x)'
    assert normalize_aggregate('lower(x)') == 'lower(x)'
    assert if_('a', 1, 0) == 'IF(a,1,0)'
