"""Interactively prepend a prefix to the identifiers of source files."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, MutableMapping

_WORD = re.compile(r"[A-Za-z_]+")


def is_word_char(c: str) -> bool:
    """Return whether ``c`` is an ASCII letter or an underscore."""
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z" or c == "_")


def prepend_words(
    text: str,
    replacements: MutableMapping[str, str],
    ask: Callable[[str], str],
) -> str:
    """Return ``text`` with each word replaced by its cached replacement.

    Words not yet in ``replacements`` are passed to ``ask``, which returns a
    prefix (empty to leave the word alone); the result is cached. Comments and
    double-quoted strings are copied unchanged. An unterminated block comment
    raises ``ValueError``.
    """
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        c = text[i]

        if c == "/":
            out.append(c)
            i += 1
            nxt = text[i : i + 1]
            if nxt == "/":
                end = text.find("\n", i)
                if end < 0:
                    end = n
                out.append(text[i:end])
                i = end
                continue
            if nxt == "*":
                end = text.find("*/", i + 1)
                if end < 0:
                    raise ValueError("unterminated block comment")
                out.append(text[i : end + 2])
                i = end + 2
                continue
            # a lone slash: the character after it is copied as it stands
            out.append(nxt)
            i += len(nxt)
            continue

        if c == '"':
            end = text.find('"', i + 1)
            end = n if end < 0 else end + 1
            out.append(text[i:end])
            i = end
            continue

        if not is_word_char(c):
            out.append(c)
            i += 1
            continue

        match = _WORD.match(text, i)
        word = match.group()
        i = match.end()
        if word not in replacements:
            prefix = ask(word)
            replacements[word] = prefix + word if prefix else word
        out.append(replacements[word])

    return "".join(out)


def _prompt(word: str) -> str:
    try:
        return input(f"{word} : ")
    except EOFError:
        return ""


def main(argv: list[str] | None = None) -> int:
    """Rewrite each named file in place, asking for a prefix for every new word."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return -1

    replacements: dict[str, str] = {}
    for path in argv:
        try:
            with open(path, encoding="utf-8", errors="surrogateescape", newline="") as stream:
                text = stream.read()
        except OSError:
            return -1

        try:
            result = prepend_words(text, replacements, _prompt)
        except ValueError:
            return -1

        try:
            with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as stream:
                stream.write(result)
        except OSError:
            return -1

    return 0


if __name__ == "__main__":
    sys.exit(main())