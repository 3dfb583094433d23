# toytools

Command-line tools and helpers for working with the Toy scripting language:
a disassembler for compiled bytecode, reference-counted string and bytecode
values, and three small source-file utilities.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Commands

### toy-disassembler

Reads a compiled Toy bytecode file and prints a listing of it.

    toy-disassembler program.tb
    toy-disassembler -a program.tb    # alternate, assembler-like format
    toy-disassembler -g program.tb    # group literals with their functions
    toy-disassembler -h               # or --help

The default output is a tree. It shows the file size, the header version,
each literal cache, the functions nested inside it, and the code of each
section with instruction offsets and opcode numbers.

With `-a` the output is assembler-like. It uses `.lit` directives, the labels
`LIT_MAIN`, `MAIN`, `LIT_FUN_*` and `FUN_*`, and numbered jump labels such as
`JL_0000_`.

`-g` turns on `-a` as well. It prints each function's literals right before
that function's code.

If no file is given, the usage line goes to standard error and the exit
status is 1. If the file cannot be opened, or the bytecode is malformed (for
example, a missing section end or function end), the command prints a message
and exits with status 1.

### toy-mecha

Extracts Markdown embedded in source comments between `/*!` and `!*/`. The
Markdown for each input path is written to that path with every `.` replaced
by `_` and `.md` appended. For example, `toy_scope.h` becomes `toy_scope_h.md`.
A block closed as `//!*` has its trailing `//` dropped. Files with no embedded
Markdown produce no output.

    toy-mecha source/*.h

### toy-guard

Rewrites files in place. A file whose first line is exactly `#pragma once` has
that line replaced by an `#ifndef`/`#define` pair, and a closing `#endif` is
added at the end. The guard is named after the file name, upper-cased, with
dots turned into underscores (`toy_scope.h` becomes `TOY_SCOPE_H`). Other
files are written back unchanged.

    toy-guard source/*.h

### toy-uptown

Walks the identifiers (runs of ASCII letters and underscores) in each file.
The first time it meets a word, it asks what to prepend to it. It then
rewrites the files in place. The answers are remembered across all the files
given. An empty answer keeps the word as it is. Comments and double-quoted
strings are copied unchanged. Pass headers first so their answers are reused.

    toy-uptown source/*.h source/*.c

Each of `toy-mecha`, `toy-guard` and `toy-uptown` exits with status -1 in
these cases:

- no files are named;
- a file cannot be read or written;
- for `toy-uptown`, a block comment is never closed.

## Library use

```python
from toytools.refstring import RefString
from toytools.reffunction import RefFunction
from toytools.disassembler import Disassembler, disassemble

name = RefString("print")
alias = name.copy()              # same object, refcount goes to 2
assert alias is name and name.refcount == 2
assert name == "print" and len(name) == 5
name.release()                   # returns the references left: 1

code = RefFunction(b"\x00\x01")
assert bytes(code.deep_copy()) == b"\x00\x01"

disassemble("program.tb", alt_format=True, group=False, out=None)   # out=None: stdout
Disassembler(alt_format=False).run(open("program.tb", "rb").read(), "program.tb")
```

### Reference-counted values

`RefString` and `RefFunction` work the same way:

- `copy()` hands out another reference to the same object.
- `deep_copy()` returns an independent value with one reference.
- `release()` gives a reference back and returns how many remain.

Once the count reaches zero, `copy`, `deep_copy` and `release` raise
`ValueError`.

### Other modules

- `toytools.cargs` is a small getopt-style option parser. `Option` describes
  an option. `OptionContext(options, argv)` skips `argv[0]` and yields
  `(identifier, value)` pairs; unknown options yield `"?"`. After iteration,
  the non-option arguments start at `context.argv[context.index]`.
  `format_options` and `print_options` produce the help text.
- `toytools.opcodes` holds the `OpCode`, `LiteralType` and `ArgType`
  enumerations, along with `opcode_name` and `op_args`.
- `toytools.reader.ByteReader` reads little-endian bytes, words, integers,
  floats and NUL-terminated strings. It raises `DisassemblyError` on short or
  malformed input.
- `toytools.code.disassemble_section` lists one run of instructions.
- `toytools.mecha`, `toytools.guard` and `toytools.uptown` expose the
  functions behind their commands:
  - `extract_markdown` and `markdown_path`;
  - `guard_name`, `guard_start`, `guard_end` and `replace_pragma`;
  - `is_word_char` and `prepend_words`.

## What this package does not do

There is no Toy lexer, parser, compiler or interpreter here. The package
cannot turn Toy source into bytecode or run scripts. It only reads bytecode
files that were produced elsewhere. It also has no tool for measuring memory
use while scripts run.