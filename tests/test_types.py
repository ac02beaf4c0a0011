import math

import pytest

from hlstags.error import ErrorKind, InvalidInputError
from hlstags.types import ProtocolVersion, SignedDecimalFloatingPoint, parse_yes_or_no


@pytest.mark.parametrize("text,expected", [
    ("0", 0.0),
    ("1", 1.0),
    ("-1.23", -1.23),
    ("+1.5", 1.5),
    ("10.000", 10.0),
])
def test_parse_signed_decimal(text, expected):
    assert float(SignedDecimalFloatingPoint.parse(text)) == expected


@pytest.mark.parametrize("text", [
    "",
    "abc",
    "1e3",
    "1E3",
    "1.",
    ".5",
    " 1",
    "1 ",
    "+",
    "--1",
    "nan",
    "inf",
    "1" * 400,
])
def test_parse_signed_decimal_rejects(text):
    with pytest.raises(InvalidInputError):
        SignedDecimalFloatingPoint.parse(text)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "1.0", True, None])
def test_constructor_rejects_non_finite_and_non_numbers(value):
    with pytest.raises(InvalidInputError):
        SignedDecimalFloatingPoint(value)


@pytest.mark.parametrize("value,text", [
    (0.0, "0"),
    (-0.0, "-0"),
    (1, "1"),
    (1.5, "1.5"),
    (-1.23, "-1.23"),
    (1e-7, "0.0000001"),
    (1e22, "10000000000000000000000"),
])
def test_canonical_format(value, text):
    assert str(SignedDecimalFloatingPoint(value)) == text


@pytest.mark.parametrize("text", ["0", "-0", "1.23", "-1.23", "123.456", "0.001"])
def test_canonical_text_survives_round_trip(text):
    assert str(SignedDecimalFloatingPoint.parse(text)) == text


def test_int_is_stored_as_float():
    value = SignedDecimalFloatingPoint(3)
    assert isinstance(value.value, float)
    assert value == SignedDecimalFloatingPoint(3.0)


def test_parse_yes_or_no():
    assert parse_yes_or_no("YES") is True
    assert parse_yes_or_no("NO") is False


@pytest.mark.parametrize("text", ["yes", "no", "Yes", "", "MAYBE", "YES "])
def test_parse_yes_or_no_is_strict(text):
    with pytest.raises(InvalidInputError) as excinfo:
        parse_yes_or_no(text)
    assert excinfo.value.kind is ErrorKind.INVALID_INPUT


def test_protocol_version_text():
    assert str(ProtocolVersion.V1) == "1"
    assert ProtocolVersion.parse("7") is ProtocolVersion.V7
    with pytest.raises(InvalidInputError):
        ProtocolVersion.parse("8")
