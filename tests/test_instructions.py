import pytest

from xarm.instructions import Arm64Instruction

MNEMONICS = [
    "ADD",
    "ADC",
    "ADCS",
    "ADDG",
    "ADR",
    "ADRP",
    "AND",
    "ANDS",
    "ASR",
    "ASRV",
    "AT",
    "AUTDA",
    "AUTDZA",
    "AUTDBA",
    "AUTDZB",
    "B",
    "SUB",
]


def test_lookup_by_mnemonic():
    assert Arm64Instruction("ADD") is Arm64Instruction.ADD


def test_autdb_mnemonic():
    assert Arm64Instruction.AUTDB.value == "AUTDBA"
    assert Arm64Instruction("AUTDBA") is Arm64Instruction.AUTDB


def test_member_count():
    found = {Arm64Instruction(mnemonic) for mnemonic in MNEMONICS}
    assert len(found) == 17
    assert found == set(Arm64Instruction)


@pytest.mark.parametrize("member", list(Arm64Instruction))
def test_value_round_trip(member):
    assert Arm64Instruction(member.value) is member


@pytest.mark.parametrize("mnemonic", MNEMONICS)
def test_str_is_mnemonic(mnemonic):
    assert str(Arm64Instruction(mnemonic)) == mnemonic


def test_unknown_mnemonic():
    with pytest.raises(ValueError):
        Arm64Instruction("MOV")


def test_compares_equal_to_string():
    assert Arm64Instruction("SUB") == "SUB"
    assert Arm64Instruction("SUB") is Arm64Instruction.SUB