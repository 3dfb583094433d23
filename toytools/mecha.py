"""Extract markdown embedded in ``/*! ... !*/`` comments of source files."""

from __future__ import annotations

import sys


def extract_markdown(text: str) -> str:
    """Return the markdown held between ``*!`` and ``!*`` markers in ``text``."""
    buffer = ""
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        i += 1
        if c != "*":
            continue
        if i >= n:
            break
        c = text[i]
        i += 1
        if c != "!":
            continue

        # inside a block: read until "!" followed by "*"
        chunk = []
        while i < n:
            c = text[i]
            i += 1
            if c == "!" and i < n and text[i] == "*":
                break
            chunk.append(c)
        buffer += "".join(chunk)

        # a block closed as "//!*" leaves the comment slashes behind
        if buffer.endswith("//"):
            buffer = buffer[:-2]
    return buffer


def markdown_path(path: str) -> str:
    """Return the name of the markdown file written for ``path``."""
    return path.replace(".", "_") + ".md"


def main(argv: list[str] | None = None) -> int:
    """Write a markdown file next to each named source file that holds any."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return -1

    for path in argv:
        try:
            with open(path, encoding="utf-8", errors="surrogateescape", newline="") as stream:
                text = stream.read()
        except OSError:
            return -1

        markdown = extract_markdown(text)
        if not markdown:
            continue

        try:
            with open(
                markdown_path(path), "w", encoding="utf-8", errors="surrogateescape", newline=""
            ) as stream:
                stream.write(markdown)
        except OSError:
            return -1

    return 0


if __name__ == "__main__":
    sys.exit(main())