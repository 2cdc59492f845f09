import pytest

from lumen.guid import Guid, hash_combine, new_guid

SAMPLE = "c405c66c-ccbb-4ffd-9b62-c286c0fd7a3d"


def test_default_is_invalid_zero():
    g = Guid()
    assert not g.is_valid()
    assert g.bytes == bytes(16)
    assert str(g) == "00000000-0000-0000-0000-000000000000"


def test_string_round_trip():
    g = Guid(SAMPLE)
    assert g.is_valid()
    assert str(g) == SAMPLE
    assert Guid(str(g)) == g


def test_uppercase_parses_to_lowercase():
    assert str(Guid(SAMPLE.upper())) == SAMPLE


def test_dashes_are_optional():
    assert Guid(SAMPLE.replace("-", "")) == Guid(SAMPLE)


@pytest.mark.parametrize(
    "text",
    [
        SAMPLE[:-1],
        SAMPLE + "a",
        SAMPLE + "ab",
        SAMPLE.replace("c", "g", 1),
        "",
        "not a guid",
    ],
)
def test_malformed_string_gives_empty(text):
    g = Guid(text)
    assert not g.is_valid()
    assert g == Guid()


def test_bytes_round_trip():
    raw = bytes(range(16))
    g = Guid(raw)
    assert g.bytes == raw
    assert bytes(g) == raw
    assert Guid(str(g)) == g


def test_bytes_wrong_length_raises():
    with pytest.raises(ValueError):
        Guid(bytes(15))


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        Guid(123)


def test_ordering_follows_bytes():
    low = Guid(bytes(15) + b"\x01")
    high = Guid(b"\x01" + bytes(15))
    assert low < high
    assert high > low
    assert sorted([high, low]) == [low, high]
    assert not (low < low)


def test_equality_and_hash():
    a = Guid(SAMPLE)
    b = Guid(SAMPLE.upper())
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Guid()


def test_hash_combine_constant():
    assert hash_combine(0, 0) == 0x9E3779B9


def test_hash_combine_stays_64_bit():
    value = hash_combine((1 << 64) - 1, (1 << 64) - 1)
    assert 0 <= value < (1 << 64)


def test_swap():
    a = Guid(SAMPLE)
    b = Guid()
    a.swap(b)
    assert not a.is_valid()
    assert str(b) == SAMPLE


def test_new_guid_unique_and_valid():
    ids = {new_guid() for _ in range(50)}
    assert len(ids) == 50
    for g in ids:
        assert g.is_valid()
        text = str(g)
        assert [len(part) for part in text.split("-")] == [8, 4, 4, 4, 12]
        assert Guid(text) == g