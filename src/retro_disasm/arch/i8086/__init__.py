"""
Intel 8086 (MOV命令サブセット) アーキテクチャパッケージ。
"""
from retro_disasm.arch.i8086.disassembler import Disassembler, decode_all, disassemble, disassemble_text
from retro_disasm.arch.i8086.instructions import decode_instruction

__all__ = ["Disassembler", "decode_all", "decode_instruction", "disassemble", "disassemble_text"]
