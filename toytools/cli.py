"""Command line entry point of the bytecode disassembler."""

from __future__ import annotations

import sys

from toytools.cargs import Option, OptionContext, print_options
from toytools.disassembler import disassemble
from toytools.reader import DisassemblyError

_USAGE = "Usage: disassembler [OPTION] file\n"

OPTIONS = (
    Option("a", access_letters="a", description="Alternate format"),
    Option("g", access_letters="g", description="Group literals with functions"),
    Option("h", access_letters="h", access_name="help", description="Shows the command help"),
)


def main(argv: list[str] | None = None) -> int:
    """Disassemble the file named on the command line; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]

    context = OptionContext(OPTIONS, ["disassembler", *argv])
    alt_format = False
    group = False
    for identifier, _ in context:
        if identifier == "a":
            alt_format = True
        elif identifier == "g":
            group = True
            alt_format = True
        elif identifier == "h":
            sys.stdout.write(_USAGE)
            print_options(OPTIONS, sys.stdout)
            return 0

    if context.index >= len(context.argv):
        sys.stderr.write(_USAGE)
        return 1

    filename = context.argv[context.index]
    try:
        disassemble(filename, alt_format, group, sys.stdout)
    except OSError:
        sys.stdout.write("Not able to open the file.\n")
        return 1
    except DisassemblyError as error:
        sys.stdout.write(f"\nERROR: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())