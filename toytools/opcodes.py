"""Opcodes, literal types and operand layouts of the bytecode format."""

from __future__ import annotations

from enum import IntEnum


class OpCode(IntEnum):
    """Instruction opcodes as stored in the bytecode."""

    EOF = 0
    PASS = 1
    ASSERT = 2
    PRINT = 3
    LITERAL = 4
    LITERAL_LONG = 5
    LITERAL_RAW = 6
    NEGATE = 7
    ADDITION = 8
    SUBTRACTION = 9
    MULTIPLICATION = 10
    DIVISION = 11
    MODULO = 12
    GROUPING_BEGIN = 13
    GROUPING_END = 14
    SCOPE_BEGIN = 15
    SCOPE_END = 16
    TYPE_DECL_removed = 17
    TYPE_DECL_LONG_removed = 18
    VAR_DECL = 19
    VAR_DECL_LONG = 20
    FN_DECL = 21
    FN_DECL_LONG = 22
    VAR_ASSIGN = 23
    VAR_ADDITION_ASSIGN = 24
    VAR_SUBTRACTION_ASSIGN = 25
    VAR_MULTIPLICATION_ASSIGN = 26
    VAR_DIVISION_ASSIGN = 27
    VAR_MODULO_ASSIGN = 28
    TYPE_CAST = 29
    TYPE_OF = 30
    IMPORT = 31
    EXPORT_removed = 32
    INDEX = 33
    INDEX_ASSIGN = 34
    INDEX_ASSIGN_INTERMEDIATE = 35
    DOT = 36
    COMPARE_EQUAL = 37
    COMPARE_NOT_EQUAL = 38
    COMPARE_LESS = 39
    COMPARE_LESS_EQUAL = 40
    COMPARE_GREATER = 41
    COMPARE_GREATER_EQUAL = 42
    INVERT = 43
    AND = 44
    OR = 45
    JUMP = 46
    IF_FALSE_JUMP = 47
    FN_CALL = 48
    FN_RETURN = 49
    POP_STACK = 50
    TERNARY = 51
    FN_END = 52
    SECTION_END = 255


#: One past the last real opcode; not a valid instruction.
END_OPCODES = 53


class LiteralType(IntEnum):
    """Types of the literals stored in a literal cache."""

    NULL = 0
    BOOLEAN = 1
    INTEGER = 2
    FLOAT = 3
    STRING = 4
    ARRAY = 5
    DICTIONARY = 6
    FUNCTION = 7
    IDENTIFIER = 8
    TYPE = 9
    OPAQUE = 10
    ANY = 11
    TYPE_INTERMEDIATE = 12
    ARRAY_INTERMEDIATE = 13
    DICTIONARY_INTERMEDIATE = 14
    FUNCTION_INTERMEDIATE = 15
    FUNCTION_ARG_REST = 16
    FUNCTION_NATIVE = 17
    FUNCTION_HOOK = 18
    INDEX_BLANK = 19


class ArgType(IntEnum):
    """Kinds of operand that may follow an opcode."""

    NONE = 0
    BYTE = 1
    WORD = 2
    INTEGER = 3
    FLOAT = 4
    STRING = 5


_NO_ARGS = (ArgType.NONE, ArgType.NONE, False)

_OP_ARGS: dict[int, tuple[ArgType, ArgType, bool]] = {
    OpCode.LITERAL: (ArgType.BYTE, ArgType.NONE, False),
    OpCode.LITERAL_LONG: (ArgType.WORD, ArgType.NONE, False),
    OpCode.VAR_DECL: (ArgType.BYTE, ArgType.BYTE, False),
    OpCode.VAR_DECL_LONG: (ArgType.WORD, ArgType.WORD, False),
    OpCode.FN_DECL: (ArgType.BYTE, ArgType.BYTE, False),
    OpCode.FN_DECL_LONG: (ArgType.WORD, ArgType.WORD, False),
    OpCode.INDEX_ASSIGN: (ArgType.BYTE, ArgType.NONE, False),
    OpCode.AND: (ArgType.WORD, ArgType.NONE, True),
    OpCode.OR: (ArgType.WORD, ArgType.NONE, True),
    OpCode.JUMP: (ArgType.WORD, ArgType.NONE, True),
    OpCode.IF_FALSE_JUMP: (ArgType.WORD, ArgType.NONE, True),
    OpCode.FN_RETURN: (ArgType.WORD, ArgType.NONE, False),
}


def opcode_name(op: int) -> str:
    """Return the printed name of opcode ``op``."""
    if op == OpCode.SECTION_END:
        return "SECTION_END"
    if 0 <= op < END_OPCODES:
        return OpCode(op).name
    return f"(OP UNKNOWN [{chr(op & 0xFF)}])"


def op_args(op: int) -> tuple[ArgType, ArgType, bool]:
    """Return ``(first operand, second operand, is_jump)`` for opcode ``op``."""
    if not 0 <= op < END_OPCODES:
        raise ValueError(f"opcode {op} has no operand layout")
    return _OP_ARGS.get(op, _NO_ARGS)