"""Tests for the Snowflake value type.

Critical Invariants:
- Equality, ordering and hashing follow the wrapped integer only
- The full u64 range is representable, nothing outside it is
- Zero is the absent sentinel and the default
- parse() accepts ASCII decimal digits only
"""

import dataclasses

import pytest

from snowflake_id import U64_MAX, Snowflake, SnowflakeError, SnowflakeParseError


def test_default_is_sentinel_zero():
    sf = Snowflake()
    assert sf == Snowflake(0)
    assert sf.to_u64() == 0
    assert not sf


def test_from_u64_to_u64_is_lossless(boundary_values):
    for value in boundary_values:
        assert Snowflake.from_u64(value).to_u64() == value


@pytest.mark.parametrize(
    ("value", "error"),
    [
        (-1, ValueError),
        (U64_MAX + 1, ValueError),
        ("42", TypeError),
        (42.0, TypeError),
        (True, TypeError),
        (None, TypeError),
    ],
    ids=["negative", "overflow", "str", "float", "bool", "none"],
)
def test_construction_rejects_non_u64(value, error):
    with pytest.raises(error):
        Snowflake(value)


def test_snowflake_is_immutable():
    sf = Snowflake(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        sf.value = 2  # type: ignore[misc]


@pytest.mark.parametrize(
    ("a", "b"),
    [(0, 1), (1, 0), (5, 5), (2**63 - 1, 2**63), (U64_MAX, 0), (U64_MAX, U64_MAX)],
)
def test_ordering_matches_integer_ordering(a, b):
    """INVARIANT: pure unsigned ordering, no signed wraparound at 2**63."""
    sa, sb = Snowflake(a), Snowflake(b)
    assert (sa < sb) == (a < b)
    assert (sa <= sb) == (a <= b)
    assert (sa > sb) == (a > b)
    assert (sa == sb) == (a == b)


def test_sorting_uses_integer_order():
    values = [U64_MAX, 0, 2**63, 42]
    assert [sf.to_u64() for sf in sorted(map(Snowflake, values))] == sorted(values)


def test_equal_values_hash_equal():
    a = Snowflake.from_u64(987654321098765432)
    b = Snowflake.parse("987654321098765432")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert {a: "x"}[b] == "x"


def test_not_equal_to_plain_int():
    assert Snowflake(1) != 1
    with pytest.raises(TypeError):
        Snowflake(1) < 2  # noqa: B015


@pytest.mark.parametrize(
    ("value", "text"),
    [(0, "0"), (1, "1"), (42, "42"), (U64_MAX, "18446744073709551615")],
)
def test_canonical_string_form(value, text):
    sf = Snowflake(value)
    assert str(sf) == text
    assert sf.to_string() == text


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", 0),
        ("1", 1),
        ("007", 7),
        ("987654321098765432", 987654321098765432),
        ("18446744073709551615", U64_MAX),
    ],
)
def test_parse_accepts_decimal_u64(text, expected):
    assert Snowflake.parse(text) == Snowflake(expected)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "abc",
        "-1",
        "+1",
        " 1",
        "1 ",
        "1\n",
        "1_000",
        "1,000",
        "0x10",
        "12.5",
        "١٢",
        "18446744073709551616",
        "99999999999999999999999",
        "1" * 5000,
    ],
    ids=[
        "empty",
        "letters",
        "minus",
        "plus",
        "leading-space",
        "trailing-space",
        "trailing-newline",
        "underscore",
        "comma",
        "hex",
        "fraction",
        "non-ascii-digits",
        "overflow",
        "far-overflow",
        "beyond-int-digit-limit",
    ],
)
def test_parse_rejects_invalid_text(text):
    with pytest.raises(SnowflakeParseError) as exc_info:
        Snowflake.parse(text)
    assert exc_info.value.text == text
    assert str(exc_info.value) == "invalid snowflake"


def test_parse_accepts_long_leading_zero_runs():
    assert Snowflake.parse("0" * 5000 + "42") == Snowflake(42)
    assert Snowflake.parse("0" * 30) == Snowflake(0)


def test_parse_rejects_non_string():
    with pytest.raises(SnowflakeParseError):
        Snowflake.parse(42)  # type: ignore[arg-type]


def test_parse_error_is_value_error():
    """Callers already catching ValueError around int() keep working."""
    with pytest.raises(ValueError):
        Snowflake.parse("nope")
    assert issubclass(SnowflakeParseError, SnowflakeError)


def test_into_option_maps_zero_to_none():
    assert Snowflake(0).into_option() is None
    assert Snowflake(1).into_option() == Snowflake(1)
    assert Snowflake(U64_MAX).into_option() == Snowflake(U64_MAX)


def test_transparent_integer_access():
    sf = Snowflake(255)
    assert int(sf) == 255
    assert sf.value == 255
    assert hex(sf) == "0xff"
    assert [10, 20, 30][Snowflake(1)] == 20
    assert bool(sf)
