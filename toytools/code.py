"""Disassembly of a section of instructions."""

from __future__ import annotations

import itertools
import sys
from collections.abc import Iterator
from typing import TextIO

from toytools.opcodes import END_OPCODES, ArgType, OpCode, op_args, opcode_name
from toytools.reader import ByteReader


def _indent(depth: int) -> str:
    """Return the first ``depth`` characters of the tree rule ``| | | ...``."""
    return ("| " * (depth // 2 + 1))[:depth]


def _read_arg(reader: ByteReader, kind: ArgType) -> tuple[int | None, str]:
    """Read one operand; return its numeric value (if any) and its printed form."""
    if kind is ArgType.NONE:
        return None, ""
    if kind is ArgType.BYTE:
        value = reader.read_byte()
        return value, f" b({value})"
    if kind is ArgType.WORD:
        value = reader.read_word()
        return value, f" w({value})"
    if kind is ArgType.INTEGER:
        value = reader.read_int()
        return value, f" i({value})"
    if kind is ArgType.FLOAT:
        return None, f" f({reader.read_float():f})"
    return None, f" s({reader.read_string()})"


def _is_padding(opcode: int) -> bool:
    return opcode in (OpCode.SECTION_END, OpCode.EOF)


def _find_jump_labels(
    reader: ByteReader, end: int, labels: Iterator[int]
) -> list[tuple[int, int]]:
    """Scan the section and give every jump target a label number."""
    found: list[tuple[int, int]] = []
    start = reader.pc
    while reader.pc < end:
        opcode = reader.read_byte()
        if _is_padding(opcode) or opcode >= END_OPCODES:
            continue
        first, second, is_jump = op_args(opcode)
        target, _ = _read_arg(reader, first)
        if is_jump and target is not None:
            found.append((target, next(labels)))
        _read_arg(reader, second)
    reader.pc = start
    return found


def disassemble_section(
    program: bytes,
    start: int,
    end: int,
    depth: int = 0,
    is_function: bool = False,
    alt_format: bool = False,
    labels: Iterator[int] | None = None,
    out: TextIO | None = None,
) -> int:
    """Write the instructions of ``program[start:end]`` to ``out``.

    A function section begins with its parameter and return counts. In the
    alternate format, jump targets are printed as ``JL_nnnn_`` labels whose
    numbers are drawn from ``labels``, which may be shared between sections.
    Returns the position reached in ``program``.
    """
    if out is None:
        out = sys.stdout
    if labels is None:
        labels = itertools.count()

    reader = ByteReader(program, start)
    indent = _indent(depth)

    if is_function:
        out.write("\n")
        args = reader.read_word()
        rets = reader.read_word()
        if alt_format:
            out.write(f"    .comment args:{args}, rets:{rets}")
        else:
            out.write(f"{indent}| ")

    section_start = reader.pc
    jump_labels = _find_jump_labels(reader, end, labels) if alt_format else []

    while reader.pc < end:
        offset = reader.pc - section_start
        if alt_format:
            label = next((ident for line, ident in jump_labels if line == offset), None)
            if label is not None:
                out.write(f"\nJL_{label:04d}_:")

        opcode = reader.read_byte()
        if alt_format and _is_padding(opcode):
            continue

        out.write("\n")
        if alt_format:
            out.write("    ")
        else:
            out.write(f"{indent}| [{offset:05d}]({opcode:03d}) ")

        out.write(opcode_name(opcode))
        if opcode >= END_OPCODES:
            continue

        first, second, is_jump = op_args(opcode)
        if alt_format and is_jump:
            target = reader.read_word()
            label = next((ident for line, ident in jump_labels if line == target), None)
            if label is not None:
                out.write(f" JL_{label:04d}_")
        else:
            out.write(_read_arg(reader, first)[1])
        out.write(_read_arg(reader, second)[1])

    if alt_format:
        data = reader.data
        check = reader.pc - 5
        if not (0 <= check < len(data) and data[check] == OpCode.FN_RETURN):
            out.write("\n    FN_RETURN w(0)")

    return reader.pc