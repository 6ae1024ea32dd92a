# tests/arch/i8086/test_model.py
"""
retro_disasm.arch.i8086.modelモジュールの単体テスト。
"""
import pytest

from retro_disasm.core.errors import InvalidFieldCombination

from retro_disasm.arch.i8086.model import (
    ImmediateOperand,
    Instruction,
    MemoryOperand,
    RegisterOperand,
    Width,
)

# @intent:test_suite デコード結果のデータ構造の検証。

class TestWidth:
    def test_from_bit(self):
        assert Width.from_bit(0) is Width.BYTE
        assert Width.from_bit(1) is Width.WORD

    def test_byte_count(self):
        assert Width.BYTE.byte_count == 1
        assert Width.WORD.byte_count == 2

class TestMemoryOperand:
    # @intent:test_case_invariant 直接アドレスとベースレジスタの併用を拒否することを検証します。
    def test_direct_address_excludes_components(self):
        with pytest.raises(InvalidFieldCombination):
            MemoryOperand(components=("BX",), direct_address=0x10)
        with pytest.raises(InvalidFieldCombination):
            MemoryOperand(displacement=0, direct_address=0x10)

    def test_invariant_error_has_no_stream_offset(self):
        with pytest.raises(InvalidFieldCombination) as exc:
            MemoryOperand(components=("SI",), direct_address=0x10)
        assert exc.value.offset == -1
        assert exc.value.stage == "operand"

    def test_displacement_zero_differs_from_none(self):
        assert MemoryOperand(components=("BP",), displacement=0) != MemoryOperand(components=("BP",))

    def test_is_direct(self):
        assert MemoryOperand(direct_address=0x0201).is_direct
        assert not MemoryOperand(components=("SI",)).is_direct

    # @intent:test_case_immutability オペランドが不変であることを検証します。
    def test_immutability(self):
        op = MemoryOperand(components=("SI",))
        with pytest.raises(AttributeError):
            op.displacement = 4

class TestInstruction:
    def test_length_and_hex_dump(self):
        instr = Instruction(
            destination=RegisterOperand("CX", Width.WORD),
            source=ImmediateOperand(12, Width.WORD),
            offset=0,
            raw=bytes([0xB9, 0x0C, 0x00]),
        )
        assert instr.mnemonic == "MOV"
        assert instr.length == 3
        assert instr.hex_dump() == "B9 0C 00"

    def test_immutability(self):
        instr = Instruction(destination=RegisterOperand("AL", Width.BYTE), source=ImmediateOperand(1, Width.BYTE))
        with pytest.raises(AttributeError):
            instr.mnemonic = "ADD"
