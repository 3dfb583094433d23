"""Reference-counted immutable bytecode blobs."""

from __future__ import annotations


class RefFunction:
    """An immutable block of function bytecode with a reference count.

    ``copy`` hands out another reference to the same object and ``release``
    gives one back. Once the count reaches zero the blob is spent, and any
    further use of the count raises ``ValueError``.
    """

    __slots__ = ("_data", "_refcount")

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._refcount = 1

    def _check_alive(self) -> None:
        if self._refcount <= 0:
            raise ValueError("reference function has already been released")

    @property
    def refcount(self) -> int:
        """The number of live references to this function."""
        return self._refcount

    def copy(self) -> RefFunction:
        """Take another reference to this function and return it."""
        self._check_alive()
        self._refcount += 1
        return self

    def deep_copy(self) -> RefFunction:
        """Return an independent function with the same bytecode and one reference."""
        self._check_alive()
        return RefFunction(self._data)

    def release(self) -> int:
        """Give back one reference; return how many remain."""
        self._check_alive()
        self._refcount -= 1
        return self._refcount

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __repr__(self) -> str:
        return f"RefFunction({len(self._data)} bytes, refcount={self._refcount})"