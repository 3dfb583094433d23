"""Disassembly of compiled bytecode files into a readable listing."""

from __future__ import annotations

import itertools
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from toytools.code import disassemble_section
from toytools.opcodes import LiteralType, OpCode
from toytools.reader import ByteReader, DisassemblyError

_MAIN = "MAIN"
_FUNCTION_LITERAL = ".lit FUNCTION "


def _rule(depth: int) -> str:
    """Return the first ``depth`` characters of the tree rule ``| | | ...``."""
    return ("| " * (depth // 2 + 1))[:depth]


@dataclass
class _FunctionCode:
    name: str
    start: int
    end: int


@dataclass
class _LiteralBlock:
    name: str
    text: str = ""


class Disassembler:
    """Writes a listing of a bytecode program to ``out``.

    The alternate format prints an assembler-like listing; grouping (which
    implies the alternate format) prints each function's literals next to
    its code.
    """

    def __init__(self, alt_format: bool = False, group: bool = False, out: TextIO | None = None) -> None:
        self.group = group
        self.alt_format = alt_format or group
        self._target = out
        self._program = b""
        self._labels: Iterator[int] = itertools.count()
        self._functions: list[_FunctionCode] = []
        self._blocks: list[_LiteralBlock] = []

    @property
    def out(self) -> TextIO:
        return self._target if self._target is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _section(self, start: int, end: int, depth: int, is_function: bool) -> int:
        return disassemble_section(
            self._program, start, end, depth, is_function, self.alt_format, self._labels, self.out
        )

    def run(self, program: bytes, filename: str = "") -> None:
        """Disassemble ``program``, naming it ``filename`` in the listing."""
        self._program = bytes(program)
        self._labels = itertools.count()
        self._functions = []
        self._blocks = []

        size = len(self._program)
        if self.alt_format:
            self._write(f"\n.comment File: {filename}, Size: {size}\n")
        else:
            self._write(f"\nFile: {filename}\nSize: {size}\n")

        reader = ByteReader(self._program)
        major = reader.read_byte()
        minor = reader.read_byte()
        patch = reader.read_byte()
        build = reader.read_string()
        if self.alt_format:
            self._write(f".comment Header Version: {major}.{minor}.{patch} ({build})\n")
        else:
            self._write(f"[Header Version: {major}.{minor}.{patch} ({build})]\n")

        self._write("\n.start MAIN\n")
        reader.consume_byte(OpCode.SECTION_END)

        if self.group:
            self._run_grouped(reader)
        else:
            self._run_plain(reader)

        self._write("\n")

    def _run_plain(self, reader: ByteReader) -> None:
        if self.alt_format:
            self._write("\nLIT_MAIN:")

        self._read_sections(reader, 0, "")

        if self.alt_format:
            self._write("\nMAIN:")
        else:
            self._write("|\n| --- ( reading main code ) ---")

        self._section(reader.pc, len(self._program), 0, False)

        if self.alt_format:
            self._write("\n")
            for function in self._functions:
                self._write(f"\nFUN_{function.name}:")
                self._section(function.start, function.end, 0, True)
                self._write("\n")
        else:
            self._write("\n| --- ( end main code section ) ---")

    def _run_grouped(self, reader: ByteReader) -> None:
        main_block = _LiteralBlock(_MAIN)
        self._blocks.append(main_block)
        self._read_sections(reader, 0, "", main_block)
        main_start = reader.pc
        self._write("\n")

        for block in self._blocks:
            if block.name == _MAIN:
                self._write("MAIN:\n")
                self._write(block.text.replace(_FUNCTION_LITERAL, ".lit FUNCTION (code=FUN_) "))
                self._section(main_start, len(self._program), 0, False)
                self._write("\n\n")
                continue

            self._write(f"FUN_{block.name}:\n")
            self._write(
                block.text.replace(_FUNCTION_LITERAL, f".lit FUNCTION (code=FUN_{block.name}_) ")
            )
            function = next((f for f in self._functions if f.name == block.name), None)
            if function is not None:
                self._section(function.start, function.end, 0, True)
            self._write("\n\n")

    def _read_sections(
        self, reader: ByteReader, depth: int, tree: str, block: _LiteralBlock | None = None
    ) -> None:
        """Read a literal cache and the function section that follows it."""
        alt = self.alt_format
        rule = _rule(depth)
        literal_types: list[int] = []
        lit: list[str] = []

        def entry(text: str) -> None:
            self._write(f"{rule}| | {text}")

        literal_count = reader.read_word()
        if not self.group:
            self._write("\n")
        if not alt:
            self._write(f"{rule}|   --- ( Reading {literal_count} literals from cache ) ---\n")

        for i in range(literal_count):
            kind = reader.read_byte()

            if kind == LiteralType.NULL:
                literal_types.append(LiteralType.NULL)
                if alt:
                    lit.append("    .lit NULL\n")
                else:
                    entry(f"[{i:05d}] ( null )\n")

            elif kind == LiteralType.BOOLEAN:
                value = "true" if reader.read_byte() else "false"
                literal_types.append(LiteralType.BOOLEAN)
                if alt:
                    lit.append(f"    .lit BOOLEAN {value}\n")
                else:
                    entry(f"[{i:05d}] ( boolean {value} )\n")

            elif kind == LiteralType.INTEGER:
                value = reader.read_int()
                literal_types.append(LiteralType.INTEGER)
                if alt:
                    lit.append(f"    .lit INTEGER {value}\n")
                else:
                    entry(f"[{i:05d}] ( integer {value} )\n")

            elif kind == LiteralType.FLOAT:
                value = reader.read_float()
                literal_types.append(LiteralType.FLOAT)
                if alt:
                    lit.append(f"    .lit FLOAT {value:f}\n")
                else:
                    entry(f"[{i:05d}] ( float {value:f} )\n")

            elif kind == LiteralType.STRING:
                text = reader.read_string()
                literal_types.append(LiteralType.STRING)
                if alt:
                    lit.append(f'    .lit STRING "{text}"\n')
                else:
                    entry(f'[{i:05d}] ( string "{text}" )\n')

            elif kind in (LiteralType.ARRAY, LiteralType.ARRAY_INTERMEDIATE):
                length = reader.read_word()
                if alt:
                    lit.append("    .lit ARRAY ")
                else:
                    entry(f"[{i:05d}] ( array ")
                for j in range(length):
                    index = reader.read_word()
                    if alt:
                        lit.append(f"{index} ")
                    else:
                        self._write(f"{index} ")
                    literal_types.append(LiteralType.NULL)
                    if j % 15 == 0 and j != 0:
                        if alt:
                            lit.append("\\\n" + " " * 15)
                        else:
                            self._write("\\\n")
                            entry(" " * 11)
                if alt:
                    lit.append("\n")
                else:
                    self._write(")\n")
                literal_types.append(LiteralType.ARRAY)

            elif kind in (LiteralType.DICTIONARY, LiteralType.DICTIONARY_INTERMEDIATE):
                length = reader.read_word()
                if alt:
                    lit.append("    .lit DICTIONARY ")
                else:
                    entry(f"[{i:05d}] ( dictionary ")
                for j in range(length // 2):
                    key = reader.read_word()
                    value = reader.read_word()
                    if alt:
                        lit.append(f"{key},{value} ")
                    else:
                        self._write(f"(key: {key}, val:{value}) ")
                    if j % 5 == 0 and j != 0:
                        if alt:
                            lit.append("\\\n" + " " * 20)
                        else:
                            self._write("\\\n")
                            entry(" " * 16)
                if alt:
                    lit.append("\n")
                else:
                    self._write(")\n")
                literal_types.append(LiteralType.DICTIONARY)

            elif kind == LiteralType.FUNCTION:
                index = reader.read_word()
                literal_types.append(LiteralType.FUNCTION_INTERMEDIATE)
                if alt:
                    lit.append(f"    .lit FUNCTION {index}\n")
                else:
                    entry(f"[{i:05d}] ( function index: {index} )\n")

            elif kind == LiteralType.IDENTIFIER:
                name = reader.read_string()
                literal_types.append(LiteralType.IDENTIFIER)
                if alt:
                    lit.append(f"    .lit IDENTIFIER {name}\n")
                else:
                    entry(f"[{i:05d}] ( identifier {name} )\n")

            elif kind in (LiteralType.TYPE, LiteralType.TYPE_INTERMEDIATE):
                subtype = reader.read_byte()
                constant = reader.read_byte()
                try:
                    type_name = LiteralType(subtype).name
                except ValueError:
                    raise DisassemblyError(f"unknown literal type {subtype}") from None
                if alt:
                    lit.append(f"    .lit TYPE {type_name} {constant}")
                else:
                    entry(f"[{i:05d}] ( type {type_name}: {constant})\n")

                if subtype == LiteralType.ARRAY:
                    value_type = reader.read_word()
                    if alt:
                        lit.append(f" SUBTYPE {value_type}\n")
                    else:
                        entry(f"\n          ( subtype: {value_type})\n")
                elif subtype == LiteralType.DICTIONARY:
                    key_type = reader.read_word() & 0xFF
                    value_type = reader.read_word() & 0xFF
                    if alt:
                        lit.append(f" SUBTYPE {key_type},{value_type}\n")
                    else:
                        entry(f"\n          ( subtype: [{key_type}, {value_type}] )\n\n\n")
                elif alt:
                    lit.append("\n")
                else:
                    self._write("\n")
                literal_types.append(subtype)

            elif kind == LiteralType.INDEX_BLANK:
                literal_types.append(LiteralType.INDEX_BLANK)
                if alt:
                    lit.append("    .lit BLANK\n")
                else:
                    entry(f"[{i:05d}] ( blank )\n")

        if self.group:
            if block is not None:
                block.text = "".join(lit)
        else:
            self._write("".join(lit))

        reader.consume_byte(OpCode.SECTION_END)
        if not alt:
            self._write(f"{rule}| --- ( end literal section ) ---\n")

        function_count = reader.read_word()
        function_size = reader.read_word()

        if function_count:
            if not alt:
                self._write(f"{rule}|\n")
                self._write(f"{rule}| --- ( fn count: {function_count}, total size: {function_size} ) ---\n")
            self._read_functions(reader, depth, tree, literal_types)
            if not alt:
                self._write(f"{rule}|\n")
                self._write(f"{rule}| --- ( end fn section ) ---\n")

        reader.consume_byte(OpCode.SECTION_END)

    def _read_functions(
        self, reader: ByteReader, depth: int, tree: str, literal_types: list[int]
    ) -> None:
        alt = self.alt_format
        rule = _rule(depth)
        inner_rule = _rule(depth + 4)
        functions = (t for t in literal_types if t == LiteralType.FUNCTION_INTERMEDIATE)

        for number, _ in enumerate(functions):
            size = reader.read_word()
            start = reader.pc
            end = start + size - 1

            name = f"{tree}_{number}" if alt else f"{tree}.{number}"
            if name.startswith("_"):
                name = name[1:]

            block = None
            if not alt:
                self._write(f"{rule}| |\n")
                self._write(f"{rule}| | ( fun {name} [ start: {start}, end: {end} ] )")
            elif self.group:
                block = _LiteralBlock(name)
                self._blocks.append(block)
            else:
                self._write(f"\nLIT_FUN_{name}:")

            if not 0 <= end < len(self._program) or self._program[end] != OpCode.FN_END:
                raise DisassemblyError("Failed to find function end")

            inner = ByteReader(self._program, start)
            self._read_sections(inner, depth + 4, name, block)
            code_start = inner.pc

            if alt:
                self._functions.append(_FunctionCode(name, code_start, end))
            else:
                self._write(f"{rule}| | |\n")
                self._write(f"{inner_rule}| --- ( reading code for {name} ) ---")
                self._section(code_start, end, depth + 4, True)
                self._write("\n")
                self._write(f"{inner_rule}| --- ( end code section ) ---\n")

            reader.pc += size


def disassemble(
    filename: str, alt_format: bool = False, group: bool = False, out: TextIO | None = None
) -> None:
    """Read the bytecode file ``filename`` and write its listing to ``out``."""
    with open(filename, "rb") as stream:
        program = stream.read()
    Disassembler(alt_format, group, out).run(program, filename)