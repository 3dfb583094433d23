"""Replace a leading ``#pragma once`` with classic include guards."""

from __future__ import annotations

import re
import sys

_PRAGMA = "#pragma once"


def guard_name(path: str) -> str:
    """Return the guard macro name for ``path``: its file name, upper-cased, dots as underscores."""
    name = re.split(r"[\\/]", path)[-1]
    return name.upper().replace(".", "_")


def guard_start(path: str) -> str:
    """Return the opening lines of the include guard for ``path``."""
    name = guard_name(path)
    return f"#ifndef {name}\n#define {name}\n"


def guard_end(path: str) -> str:
    """Return the closing lines of the include guard for ``path``."""
    return f"\n#endif //{guard_name(path)}\n"


def replace_pragma(text: str, path: str) -> str:
    """Return ``text`` with a first line of ``#pragma once`` turned into an include guard."""
    first, _, rest = text.partition("\n")
    if first == _PRAGMA:
        return guard_start(path) + rest + guard_end(path)
    return first + "\n" + rest


def main(argv: list[str] | None = None) -> int:
    """Rewrite each named header in place."""
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

        result = replace_pragma(text, path)

        try:
            with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as stream:
                stream.write(result)
        except OSError:
            return -1

    return 0


if __name__ == "__main__":
    sys.exit(main())