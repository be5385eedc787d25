"""Mnemonics of the supported AArch64 instructions."""

from __future__ import annotations

from enum import Enum

__all__ = ["Arm64Instruction"]


class Arm64Instruction(str, Enum):
    """AArch64 instruction mnemonics."""

    ADD = "ADD"  # add
    ADC = "ADC"  # add with carry
    ADCS = "ADCS"  # add with carry, setting flags
    ADDG = "ADDG"  # add with tag
    ADR = "ADR"  # form PC-relative address
    ADRP = "ADRP"  # form PC-relative address to 4KB page
    AND = "AND"  # bitwise and
    ANDS = "ANDS"  # bitwise and, setting flags
    ASR = "ASR"  # arithmetic shift right
    ASRV = "ASRV"  # arithmetic shift right variable
    AT = "AT"  # address translate
    AUTDA = "AUTDA"  # authenticate data address, key A
    AUTDZA = "AUTDZA"  # authenticate data zero address, key A
    AUTDB = "AUTDBA"  # authenticate data address, key B
    AUTDZB = "AUTDZB"  # authenticate data zero address, key B
    B = "B"  # branch
    SUB = "SUB"  # subtract

    def __str__(self) -> str:
        return self.value