"""Reference-counted immutable strings."""

from __future__ import annotations


class RefString:
    """An immutable string that counts the references held to it.

    ``copy`` hands out another reference to the same object and ``release``
    gives one back. Once the count reaches zero the string is spent, and any
    further use of the count raises ``ValueError``.
    """

    __slots__ = ("_text", "_refcount")

    def __init__(self, text: str) -> None:
        self._text = str(text)
        self._refcount = 1

    def _check_alive(self) -> None:
        if self._refcount <= 0:
            raise ValueError("reference string has already been released")

    @property
    def refcount(self) -> int:
        """The number of live references to this string."""
        return self._refcount

    def copy(self) -> RefString:
        """Take another reference to this string and return it."""
        self._check_alive()
        self._refcount += 1
        return self

    def deep_copy(self) -> RefString:
        """Return an independent string with the same text and one reference."""
        self._check_alive()
        return RefString(self._text)

    def release(self) -> int:
        """Give back one reference; return how many remain."""
        self._check_alive()
        self._refcount -= 1
        return self._refcount

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"RefString({self._text!r}, refcount={self._refcount})"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, RefString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)