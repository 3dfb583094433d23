import pytest

from toytools.reffunction import RefFunction


def test_new_function_has_one_reference():
    f = RefFunction(b"\x01\x02\x03")
    assert f.refcount == 1


def test_bytes_and_length_round_trip():
    data = bytes(range(40))
    f = RefFunction(data)
    assert bytes(f) == data
    assert len(f) == len(data)


def test_data_is_copied_from_mutable_input():
    data = bytearray(b"abc")
    f = RefFunction(data)
    data[0] = 0
    assert bytes(f) == b"abc"


def test_copy_shares_object():
    f = RefFunction(b"xy")
    c = f.copy()
    assert c is f
    assert f.refcount == 2


def test_release_until_spent():
    f = RefFunction(b"xy")
    assert f.release() == 0
    with pytest.raises(ValueError):
        f.release()
    with pytest.raises(ValueError):
        f.copy()


def test_deep_copy_is_independent():
    f = RefFunction(b"\x00\xff")
    f.copy()
    d = f.deep_copy()
    assert d is not f
    assert bytes(d) == bytes(f)
    assert d.refcount == 1
    assert f.refcount == 2


def test_empty_function():
    f = RefFunction(b"")
    assert len(f) == 0
    assert bytes(f) == b""