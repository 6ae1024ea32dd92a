# src/retro_disasm/arch/i8086/instructions/__init__.py
"""
8086 MOV 命令デコードパッケージ。
"""
from typing import Tuple

from retro_disasm.arch.i8086.model import Instruction
from .base import read_le
from .maps import OPCODE_PATTERNS, MovFormat, OpcodePattern, classify_opcode


# @intent:responsibility offset から1命令をデコードし、(命令, 消費バイト数) を返します。
# @intent:pre-condition offset < len(data)。終端判定は呼び出し側（Disassembler）の責務です。
def decode_instruction(data: bytes, offset: int) -> Tuple[Instruction, int]:
    """
    data[offset] を先頭バイトとして分類し、該当形式のデコード関数に委譲します。
    戻り値の消費バイト数だけカーソルを進めれば次の命令の先頭に到達します。
    """
    opcode = read_le(data, offset, 1, "classify", offset)
    entry = classify_opcode(opcode, offset)
    instruction = entry.decoder(opcode, data, offset)
    return instruction, instruction.length


__all__ = [
    "OPCODE_PATTERNS",
    "MovFormat",
    "OpcodePattern",
    "classify_opcode",
    "decode_instruction",
]
