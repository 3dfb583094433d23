import pytest

from toytools.opcodes import (
    END_OPCODES,
    ArgType,
    LiteralType,
    OpCode,
    op_args,
    opcode_name,
)


def test_names_of_known_opcodes():
    assert opcode_name(OpCode.LITERAL) == "LITERAL"
    assert opcode_name(OpCode.TYPE_DECL_removed) == "TYPE_DECL_removed"
    assert opcode_name(OpCode.EOF) == "EOF"


def test_section_end_name():
    assert OpCode.SECTION_END == 255
    assert opcode_name(255) == "SECTION_END"


def test_every_valid_opcode_named_after_member():
    for op in range(END_OPCODES):
        assert opcode_name(op) == OpCode(op).name


def test_unknown_opcode_name_uses_character():
    assert opcode_name(END_OPCODES) == f"(OP UNKNOWN [{chr(END_OPCODES)}])"
    assert opcode_name(200).startswith("(OP UNKNOWN [")


def test_jump_opcodes_are_marked():
    jumps = {op for op in range(END_OPCODES) if op_args(op)[2]}
    assert jumps == {OpCode.AND, OpCode.OR, OpCode.JUMP, OpCode.IF_FALSE_JUMP}
    for op in jumps:
        assert op_args(op)[0] == ArgType.WORD


def test_operand_layouts():
    assert op_args(OpCode.VAR_DECL) == (ArgType.BYTE, ArgType.BYTE, False)
    assert op_args(OpCode.FN_DECL_LONG) == (ArgType.WORD, ArgType.WORD, False)
    assert op_args(OpCode.LITERAL) == (ArgType.BYTE, ArgType.NONE, False)
    assert op_args(OpCode.FN_RETURN) == (ArgType.WORD, ArgType.NONE, False)
    assert op_args(OpCode.FN_END) == (ArgType.NONE, ArgType.NONE, False)
    assert op_args(OpCode.PRINT) == (ArgType.NONE, ArgType.NONE, False)


@pytest.mark.parametrize("op", [END_OPCODES, 255, -1])
def test_op_args_rejects_invalid_opcodes(op):
    with pytest.raises(ValueError):
        op_args(op)


@pytest.mark.parametrize(
    "value, name",
    [
        (0, "NULL"),
        (5, "ARRAY"),
        (6, "DICTIONARY"),
        (7, "FUNCTION"),
        (9, "TYPE"),
        (12, "TYPE_INTERMEDIATE"),
        (15, "FUNCTION_INTERMEDIATE"),
        (19, "INDEX_BLANK"),
    ],
)
def test_literal_type_lookup_by_value(value, name):
    assert LiteralType(value).name == name


def test_literal_type_rejects_unknown_value():
    with pytest.raises(ValueError):
        LiteralType(20)