"""Shared enumerations for the disassembler: code symbol kinds, ISAs and instruction widths."""

from enum import IntEnum

__all__ = ["ARMCodeSymbolType", "ISAType", "ISAInstWidth"]


class ARMCodeSymbolType(IntEnum):
    """Kind of ARM mapping symbol that marks a region of a section."""

    kThumb = 1
    kARM = 2
    kData = 4


class ISAType(IntEnum):
    """Instruction set architecture of a code region."""

    kUnknown = 0
    kThumb = 1
    kARM = 2
    kTriCore = 3
    kx86 = 4
    kMIPS = 5
    kPPC = 6
    kSPARC = 7
    kx86_64 = 8


class ISAInstWidth(IntEnum):
    """Width of an instruction unit in bytes."""

    kByte = 1
    kHWord = 2
    kWord = 4