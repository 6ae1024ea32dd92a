# retro_disasm/arch/i8086/instructions/maps.py
"""
先頭バイトのビットパターンとデコード関数のマッピング定義。
"""
from enum import Enum
from typing import Callable, List, NamedTuple

from retro_disasm.core.errors import UnsupportedOpcode
from retro_disasm.arch.i8086.model import Instruction
from . import mov


# @intent:responsibility MOV のエンコード形式を識別します。
class MovFormat(Enum):
    IMM_TO_REG = "IMM_TO_REG"
    RM_TO_FROM_REG = "RM_TO_FROM_REG"
    IMM_TO_RM = "IMM_TO_RM"
    MEM_TO_ACC = "MEM_TO_ACC"
    ACC_TO_MEM = "ACC_TO_MEM"


DecodeFunc = Callable[[int, bytes, int], Instruction]


# @intent:data_structure (マスク, パターン, 形式, デコード関数) の1エントリ。
class OpcodePattern(NamedTuple):
    mask: int
    pattern: int
    format: MovFormat
    decoder: DecodeFunc

    def matches(self, opcode: int) -> bool:
        return opcode & self.mask == self.pattern


# @intent:map 先頭ビットパターンの照合表。上から順に評価し、最初に一致したものを採用します。
OPCODE_PATTERNS: List[OpcodePattern] = [
    OpcodePattern(0xF0, 0xB0, MovFormat.IMM_TO_REG, mov.decode_mov_imm_reg),      # 1011 wreg
    OpcodePattern(0xFC, 0x88, MovFormat.RM_TO_FROM_REG, mov.decode_mov_rm_reg),   # 100010 dw
    OpcodePattern(0xFE, 0xC6, MovFormat.IMM_TO_RM, mov.decode_mov_imm_rm),        # 1100011 w
    OpcodePattern(0xFE, 0xA0, MovFormat.MEM_TO_ACC, mov.decode_mov_mem_acc),      # 1010000 w
    OpcodePattern(0xFE, 0xA2, MovFormat.ACC_TO_MEM, mov.decode_mov_acc_mem),      # 1010001 w
]


# @intent:responsibility 先頭バイトを分類し、一致したパターンを返します。
# @intent:post-condition どれにも一致しない場合は UnsupportedOpcode を送出します（推測はしない）。
def classify_opcode(opcode: int, offset: int = 0) -> OpcodePattern:
    for entry in OPCODE_PATTERNS:
        if entry.matches(opcode):
            return entry
    raise UnsupportedOpcode(offset, opcode)
