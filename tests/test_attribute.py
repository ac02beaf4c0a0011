import pytest

from hlstags.attribute import parse_attribute_pairs
from hlstags.error import InvalidInputError


def test_pairs_in_input_order():
    pairs = list(parse_attribute_pairs("TIME-OFFSET=1.23,PRECISE=YES"))
    assert pairs == [("TIME-OFFSET", "1.23"), ("PRECISE", "YES")]


def test_empty_input_yields_nothing():
    assert list(parse_attribute_pairs("")) == []


def test_duplicates_are_yielded_in_order():
    pairs = list(parse_attribute_pairs("A=1,B=2,A=3"))
    assert pairs == [("A", "1"), ("B", "2"), ("A", "3")]


def test_quoted_value_keeps_inner_commas():
    pairs = list(parse_attribute_pairs('URI="a,b=c",X-1=2'))
    assert pairs == [("URI", "a,b=c"), ("X-1", "2")]


def test_value_may_contain_equals_sign():
    assert list(parse_attribute_pairs("A=b=c")) == [("A", "b=c")]


def test_scanning_is_lazy():
    pairs = parse_attribute_pairs("A=1,broken")
    assert next(pairs) == ("A", "1")
    with pytest.raises(InvalidInputError):
        next(pairs)


@pytest.mark.parametrize("text", [
    "NOEQUALS",
    "=1",
    "A=",
    "A=1,",
    ",A=1",
    "A=1,,B=2",
    "lower=1",
    "A B=1",
    'URI="unterminated',
])
def test_malformed_attribute_lists(text):
    with pytest.raises(InvalidInputError):
        list(parse_attribute_pairs(text))
