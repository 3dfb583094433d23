"""A small getopt-style command line option parser."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

_PRINT_DISTANCE = 4
_PRINT_MIN_INDENTION = 20


@dataclass(frozen=True)
class Option:
    """Describes one flag or argument option the program accepts."""

    identifier: str
    access_letters: str | None = None
    access_name: str | None = None
    value_name: str | None = None
    description: str = ""


def _indention(options: Sequence[Option]) -> int:
    result = _PRINT_MIN_INDENTION
    for option in options:
        indention = _PRINT_DISTANCE
        if option.access_letters:
            indention += len(option.access_letters) * 4 - 2
            if option.access_name is not None:
                indention += len(option.access_name) + 4
        elif option.access_name is not None:
            indention += len(option.access_name) + 2
        if option.value_name is not None:
            indention += len(option.value_name) + 1
        result = max(result, indention)
    return result


def _accessor(option: Option) -> str:
    parts = [f"-{letter}" for letter in option.access_letters or ""]
    if option.access_name is not None:
        parts.append(f"--{option.access_name}")
    text = ", ".join(parts)
    if option.value_name is not None:
        text += f"={option.value_name}"
    return text


def format_options(options: Sequence[Option]) -> str:
    """Return the help text listing ``options``, one per line."""
    indention = _indention(options)
    lines = []
    for option in options:
        accessor = _accessor(option)
        padding = " " * max(0, indention - len(accessor))
        lines.append(f"  {accessor}{padding} {option.description}\n")
    return "".join(lines)


def print_options(options: Sequence[Option], file: TextIO | None = None) -> None:
    """Write the help text for ``options`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(format_options(options))


def _is_argument_string(arg: str) -> bool:
    return arg.startswith("-") and len(arg) > 1


class OptionContext:
    """Iterates over the options in an argument vector.

    ``argv[0]`` is the program name and is skipped. Fetching reorders
    ``self.argv`` so that options come first; once fetching is finished,
    the non-option arguments start at ``self.index``.
    """

    def __init__(self, options: Sequence[Option], argv: Sequence[str]) -> None:
        self.options = tuple(options)
        self.argv = list(argv)
        self.index = 1
        self.inner_index = 0
        self.forced_end = False
        self.identifier = "?"
        self.value: str | None = None

    def _arg(self, index: int) -> str | None:
        return self.argv[index] if 0 <= index < len(self.argv) else None

    def _find_by_name(self, name: str) -> Option | None:
        for option in self.options:
            if option.access_name is not None and option.access_name.startswith(name):
                return option
        return None

    def _find_by_letter(self, letter: str) -> Option | None:
        for option in self.options:
            if option.access_letters is not None and letter in option.access_letters:
                return option
        return None

    def _parse_value(self, option: Option, arg: str, pos: int) -> bool:
        """Read the option's value, if it takes one; return whether the argument is used up."""
        if option.value_name is None:
            return pos >= len(arg)
        if pos < len(arg) and arg[pos] == "=":
            self.value = arg[pos + 1 :]
        elif len(self.argv) > self.index + 1:
            self.index += 1
            self.value = self.argv[self.index]
        return True

    def _parse_access_name(self, arg: str) -> None:
        body = arg[2:]
        name = body.split("=", 1)[0]
        option = self._find_by_name(name)
        if option is None:
            self.index += 1
            return
        self.identifier = option.identifier
        self._parse_value(option, arg, 2 + len(name))
        self.index += 1

    def _parse_access_letter(self, arg: str) -> None:
        option = self._find_by_letter(arg[1 + self.inner_index])
        if option is None:
            self.index += 1
            self.inner_index = 0
            return
        self.identifier = option.identifier
        self.inner_index += 1
        if self._parse_value(option, arg, 1 + self.inner_index):
            self.index += 1
            self.inner_index = 0

    def _shift(self, start: int, option: int, end: int) -> None:
        shift_count = option - start
        if shift_count == 0:
            return
        self.argv[start:end] = self.argv[option:end] + self.argv[start:option]
        self.index = end - shift_count

    def _find_next(self) -> int:
        next_index = self.index
        arg = self._arg(next_index)
        if self.forced_end or arg is None:
            return -1
        while not _is_argument_string(arg):
            next_index += 1
            arg = self._arg(next_index)
            if arg is None:
                return -1
        return next_index

    def fetch(self) -> bool:
        """Move to the next option; return False once there are none left."""
        self.identifier = "?"
        self.value = None

        old_index = self.index
        new_index = self._find_next()
        if new_index < 0:
            return False
        self.index = new_index

        arg = self.argv[self.index]
        if arg[1] == "-":
            if len(arg) == 2:
                self.forced_end = True
            else:
                self._parse_access_name(arg)
        else:
            self._parse_access_letter(arg)

        self._shift(old_index, new_index, self.index)
        return not self.forced_end

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        """Yield ``(identifier, value)`` for each option fetched."""
        while self.fetch():
            yield self.identifier, self.value