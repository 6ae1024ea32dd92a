# tests/arch/i8086/test_formatter.py
"""
retro_disasm.arch.i8086.formatterモジュールの単体テスト。
"""
import pytest

from retro_disasm.config.models import DisassemblerConfig
from retro_disasm.arch.i8086.model import (
    ImmediateOperand,
    Instruction,
    MemoryOperand,
    RegisterOperand,
    Width,
)
from retro_disasm.arch.i8086.formatter import format_instruction, format_memory, format_operand

class TestFormatOperand:
    def test_register(self):
        assert format_operand(RegisterOperand("BX", Width.WORD)) == "BX"

    def test_immediate_decimal(self):
        assert format_operand(ImmediateOperand(0x0F6C, Width.WORD)) == "3948"

    @pytest.mark.parametrize("operand, expected", [
        (MemoryOperand(components=("BX", "SI")), "[BX + SI]"),
        (MemoryOperand(components=("BP",), displacement=0), "[BP]"),
        (MemoryOperand(components=("DI",), displacement=901), "[DI + 901]"),
        (MemoryOperand(components=("BX", "DI"), displacement=-37), "[BX + DI - 37]"),
        (MemoryOperand(direct_address=0x0201), "[0x0201]"),
        (MemoryOperand(displacement=12), "[12]"),
    ])
    def test_memory(self, operand, expected):
        assert format_memory(operand) == expected

    def test_unknown_operand(self):
        with pytest.raises(TypeError):
            format_operand("AX")

class TestFormatConfig:
    def test_lowercase(self):
        config = DisassemblerConfig(uppercase=False)
        instr = Instruction(
            destination=MemoryOperand(components=("BP", "SI"), displacement=4),
            source=RegisterOperand("AX", Width.WORD),
        )
        assert format_instruction(instr, config) == "mov [bp + si + 4], ax"

    def test_decimal_direct_address(self):
        config = DisassemblerConfig(address_format="decimal")
        assert format_memory(MemoryOperand(direct_address=0x0201), config) == "[513]"

    # @intent:test_case_size_keywords メモリ転送先の即値にサイズ指定子が付くことを検証します。
    def test_size_keywords(self):
        config = DisassemblerConfig(size_keywords=True)
        byte_store = Instruction(
            destination=MemoryOperand(components=("BP", "DI")),
            source=ImmediateOperand(7, Width.BYTE),
        )
        word_store = Instruction(
            destination=MemoryOperand(components=("DI",), displacement=901),
            source=ImmediateOperand(347, Width.WORD),
        )
        reg_load = Instruction(
            destination=RegisterOperand("CL", Width.BYTE),
            source=ImmediateOperand(12, Width.BYTE),
        )
        assert format_instruction(byte_store, config) == "MOV [BP + DI], BYTE 7"
        assert format_instruction(word_store, config) == "MOV [DI + 901], WORD 347"
        assert format_instruction(reg_load, config) == "MOV CL, 12"

    def test_size_keywords_lowercase(self):
        config = DisassemblerConfig(size_keywords=True, uppercase=False)
        instr = Instruction(
            destination=MemoryOperand(direct_address=0x1000),
            source=ImmediateOperand(42, Width.BYTE),
        )
        assert format_instruction(instr, config) == "mov [0x1000], byte 42"
