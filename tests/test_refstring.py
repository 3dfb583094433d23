import pytest

from toytools.refstring import RefString


def test_new_string_has_one_reference():
    s = RefString("hello world")
    assert s.refcount == 1


def test_length_and_text():
    s = RefString("hello world")
    assert len(s) == len("hello world")
    assert str(s) == "hello world"


def test_copy_returns_same_object_and_counts():
    s = RefString("abc")
    c = s.copy()
    assert c is s
    assert s.refcount == 2


def test_release_decrements_until_spent():
    s = RefString("abc")
    s.copy()
    assert s.release() == 1
    assert s.release() == 0
    with pytest.raises(ValueError):
        s.release()


def test_released_string_cannot_be_copied():
    s = RefString("abc")
    s.release()
    with pytest.raises(ValueError):
        s.copy()
    with pytest.raises(ValueError):
        s.deep_copy()


def test_deep_copy_is_independent():
    s = RefString("abc")
    s.copy()
    d = s.deep_copy()
    assert d is not s
    assert d == s
    assert d.refcount == 1
    assert s.refcount == 2


def test_equality_with_refstrings_and_plain_strings():
    a = RefString("foo")
    b = RefString("foo")
    c = RefString("foobar")
    assert a == a
    assert a == b
    assert a != c
    assert a == "foo"
    assert a != "fo"
    assert (a == 3) is False


def test_hash_matches_for_equal_strings():
    a = RefString("key")
    b = RefString("key")
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_empty_string():
    s = RefString("")
    assert len(s) == 0
    assert s == ""