import math
import struct

import pytest

from toytools.reader import ByteReader, DisassemblyError


def test_read_sequence_round_trip():
    data = (
        bytes([7])
        + struct.pack("<H", 513)
        + struct.pack("<i", -42)
        + struct.pack("<f", 1.5)
        + b"hello\0"
    )
    reader = ByteReader(data)
    assert reader.read_byte() == 7
    assert reader.read_word() == 513
    assert reader.read_int() == -42
    assert reader.read_float() == 1.5
    assert reader.read_string() == "hello"
    assert reader.pc == len(data)


def test_word_is_little_endian():
    reader = ByteReader(b"\x01\x02")
    assert reader.read_word() == 0x0201


def test_start_position():
    reader = ByteReader(b"\x00\x00\x09", pc=2)
    assert reader.read_byte() == 9
    assert reader.pc == 3


def test_float_precision_is_single():
    reader = ByteReader(struct.pack("<f", 0.1))
    value = reader.read_float()
    assert math.isclose(value, 0.1, rel_tol=1e-6)
    assert value == struct.unpack("<f", struct.pack("<f", 0.1))[0]


def test_empty_string():
    reader = ByteReader(b"\0rest")
    assert reader.read_string() == ""
    assert reader.pc == 1


def test_unterminated_string_raises():
    with pytest.raises(DisassemblyError):
        ByteReader(b"abc").read_string()


@pytest.mark.parametrize(
    "method, data",
    [("read_byte", b""), ("read_word", b"\x01"), ("read_int", b"\x01\x02"), ("read_float", b"")],
)
def test_reading_past_end_raises(method, data):
    reader = ByteReader(data)
    with pytest.raises(DisassemblyError):
        getattr(reader, method)()
    assert reader.pc == 0


def test_consume_byte_matches():
    reader = ByteReader(b"\xff\x05")
    reader.consume_byte(255)
    assert reader.pc == 1
    assert reader.read_byte() == 5


def test_consume_byte_mismatch_raises():
    reader = ByteReader(b"\x01")
    with pytest.raises(DisassemblyError, match="expected 255, found 1"):
        reader.consume_byte(255)
    assert reader.pc == 0


def test_consume_byte_at_end_raises():
    with pytest.raises(DisassemblyError):
        ByteReader(b"").consume_byte(0)