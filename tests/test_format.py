import pytest

from zrxid.errors import CardinalityError, FormatError, LengthError
from zrxid.format import Format, decode, encode


def test_set_builds_string():
    fmt = Format(3)
    fmt.set(0, "a")
    fmt.set(1, "b")
    fmt.set(2, "c")
    assert fmt.as_str() == "a:b:c"
    assert str(fmt) == "a:b:c"


def test_new_format_has_only_separators():
    fmt = Format(3)
    assert fmt.as_str() == "::"
    assert [fmt.get(i) for i in range(3)] == ["", "", ""]


def test_get_returns_set_value():
    fmt = Format(3)
    fmt.set(0, "a")
    assert fmt.get(0) == "a"


def test_parse_equality():
    a = Format.from_str("a:b:c", 3)
    b = Format.from_str("a:b:c", 3)
    assert a == b
    assert hash(a) == hash(b)


def test_ordering():
    a = Format.from_str("b:c:d", 3)
    b = Format.from_str("a:b:c", 3)
    assert a > b
    assert sorted([a, b]) == [b, a]


def test_parse_components():
    fmt = Format.from_str("zri:file::docs:index.md:", 6)
    assert [fmt.get(i) for i in range(6)] == ["zri", "file", "", "docs", "index.md", ""]


@pytest.mark.parametrize("value", ["a:b", "a:b:c:d", "", "abc"])
def test_parse_wrong_count(value):
    with pytest.raises(CardinalityError):
        Format.from_str(value, 3)


def test_cardinality_is_format_error():
    with pytest.raises(FormatError):
        Format.from_str("a", 2)


def test_set_value_with_separator_is_encoded():
    fmt = Format(3)
    fmt.set(1, "a:b")
    assert fmt.get(1) == "a:b"
    assert fmt.as_str() == ":a%3Ab:"
    assert fmt.as_str().count(":") == 2


def test_parse_flags_percent_encoded_span():
    fmt = Format.from_str("x%3Ay:b:c", 3)
    assert fmt.get(0) == "x:y"
    assert fmt.get(1) == "b"


def test_percent_without_hex_is_literal():
    fmt = Format.from_str("a%zz:b:c", 3)
    assert fmt.get(0) == "a%zz"


def test_resetting_plain_value_clears_flag():
    fmt = Format(2)
    fmt.set(0, "a:b")
    fmt.set(0, "a%41")
    assert fmt.get(0) == "a%41"


@pytest.mark.parametrize("values", [
    ["a", "b", "c"],
    ["", "middle", ""],
    ["with:colon", "é", "x/y/z"],
    ["long" * 20, "", "z"],
])
def test_round_trip_through_string(values):
    fmt = Format(3)
    for index, value in enumerate(values):
        fmt.set(index, value)
    parsed = Format.from_str(fmt.as_str(), 3)
    assert [parsed.get(i) for i in range(3)] == values
    assert parsed == fmt


def test_growing_and_shrinking_keeps_other_spans():
    fmt = Format.from_str("a:é:c", 3)
    fmt.set(0, "longer value")
    assert fmt.get(1) == "é"
    assert fmt.get(2) == "c"
    fmt.set(0, "")
    assert fmt.get(1) == "é"
    assert fmt.get(2) == "c"
    assert fmt.as_str() == ":é:c"


def test_set_bytes_value():
    fmt = Format(2)
    fmt.set(1, b"bytes")
    assert fmt.get(1) == "bytes"


def test_set_too_long_raises_length_error():
    fmt = Format(2)
    with pytest.raises(LengthError):
        fmt.set(0, "x" * 70000)
    assert fmt.as_str() == ":"


def test_parse_too_long_raises_length_error():
    with pytest.raises(LengthError):
        Format.from_str("x" * 70000 + ":", 2)


def test_index_out_of_range():
    fmt = Format(2)
    with pytest.raises(IndexError):
        fmt.get(2)
    with pytest.raises(IndexError):
        fmt.set(-1, "a")


def test_span_count_limit():
    with pytest.raises(ValueError):
        Format(65)
    assert Format(64).as_str() == ":" * 63


def test_copy_is_independent():
    fmt = Format.from_str("a:b:c", 3)
    clone = fmt.copy()
    clone.set(1, "changed")
    assert fmt.get(1) == "b"
    assert clone.get(1) == "changed"
    assert fmt != clone


def test_encode_without_separator_returns_same():
    text = "plain/value"
    assert encode(text) is text


@pytest.mark.parametrize("value", ["a:b", "::", "é:ü", "no separator"])
def test_encode_decode_round_trip(value):
    encoded = encode(value)
    assert ":" not in encoded
    assert decode(encoded) == value


def test_decode_bytes():
    assert decode(encode("x:y").encode()) == "x:y"