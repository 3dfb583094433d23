"""Tools for the Toy scripting language: a bytecode disassembler, reference-counted values and source-file utilities."""

__version__ = "0.1.0"
__all__ = [
    "cargs",
    "cli",
    "code",
    "disassembler",
    "guard",
    "mecha",
    "opcodes",
    "reader",
    "reffunction",
    "refstring",
    "uptown",
]