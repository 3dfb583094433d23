"""Sequential reading of values from a bytecode buffer."""

from __future__ import annotations

import struct


class DisassemblyError(Exception):
    """Raised when bytecode cannot be read as expected."""


class ByteReader:
    """Reads little-endian values from ``data``, advancing ``pc`` as it goes."""

    def __init__(self, data: bytes, pc: int = 0) -> None:
        self.data = bytes(data)
        self.pc = pc

    def _take(self, size: int) -> bytes:
        end = self.pc + size
        if self.pc < 0 or end > len(self.data):
            raise DisassemblyError(
                f"read of {size} bytes at {self.pc} runs past the end ({len(self.data)} bytes)"
            )
        chunk = self.data[self.pc : end]
        self.pc = end
        return chunk

    def read_byte(self) -> int:
        """Read an unsigned 8-bit value."""
        return self._take(1)[0]

    def read_word(self) -> int:
        """Read an unsigned 16-bit value."""
        return struct.unpack("<H", self._take(2))[0]

    def read_int(self) -> int:
        """Read a signed 32-bit value."""
        return struct.unpack("<i", self._take(4))[0]

    def read_float(self) -> float:
        """Read a 32-bit floating point value."""
        return struct.unpack("<f", self._take(4))[0]

    def read_string(self) -> str:
        """Read a NUL-terminated string, consuming the terminator."""
        end = self.data.find(b"\0", self.pc)
        if self.pc < 0 or self.pc > len(self.data) or end < 0:
            raise DisassemblyError(f"unterminated string at {self.pc}")
        text = self.data[self.pc : end].decode("utf-8", errors="replace")
        self.pc = end + 1
        return text

    def consume_byte(self, expected: int) -> None:
        """Skip one byte, which must equal ``expected``."""
        found = self.data[self.pc] if 0 <= self.pc < len(self.data) else None
        if found != expected:
            raise DisassemblyError(
                f"Failed to consume the correct byte (expected {expected}, found {found})"
            )
        self.pc += 1