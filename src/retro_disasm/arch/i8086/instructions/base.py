# retro_disasm/arch/i8086/instructions/base.py
"""
8086 バイト読み出しとアドレッシングモード解決ロジック。
"""
from typing import Tuple

from retro_disasm.core.bits import extract_bits
from retro_disasm.core.errors import TruncatedStream
from retro_disasm.arch.i8086.model import MemoryOperand, Operand, RegisterOperand, Width
from retro_disasm.arch.i8086.registers import (
    is_direct_address,
    lookup_effective_address,
    lookup_register,
)

# @intent:responsibility アドレッシングモード解決の結果（オペランド、消費バイト数）を返す型。
OperandResult = Tuple[Operand, int]

MOD_REGISTER = 0b11


# @intent:responsibility pos から count バイトをリトルエンディアンで読み出します。
# @intent:post-condition 入力が不足している場合は TruncatedStream を送出します。
def read_le(data: bytes, pos: int, count: int, stage: str, start: int) -> int:
    available = max(len(data) - pos, 0)
    if available < count:
        raise TruncatedStream(start, stage, count, available)
    value = 0
    for i in range(count):
        value |= data[pos + i] << (8 * i)
    return value


# @intent:responsibility 8bit値を16bitの符号付き整数に符号拡張します。
def sign_extend_8(value: int) -> int:
    return value - 0x100 if value & 0x80 else value


# @intent:responsibility 16bit値を符号付き整数として解釈します。
def to_signed_16(value: int) -> int:
    return value - 0x10000 if value & 0x8000 else value


# @intent:responsibility mod/reg/rm バイトを (mod, reg, rm) に分解します。
def split_modrm(byte: int) -> Tuple[int, int, int]:
    return extract_bits(byte, 1, 2), extract_bits(byte, 3, 3), extract_bits(byte, 6, 3)


# @intent:responsibility mod と r/m から1つのレジスタまたはメモリオペランドを解決します。
# @intent:pre-condition pos は mod/reg/rm バイトの直後を指していること。
def decode_rm_operand(data: bytes, pos: int, mod: int, rm: int, width: Width, start: int) -> OperandResult:
    """
    mod=11 はレジスタ直接 (0バイト)、mod=00 かつ rm=110 は直接アドレス (2バイト)、
    それ以外は mod に応じて 0/1/2 バイトのディスプレースメントを読みます。
    """
    if mod == MOD_REGISTER:
        return RegisterOperand(lookup_register(width, rm, start), width), 0

    if is_direct_address(mod, rm):
        address = read_le(data, pos, 2, "address", start)
        return MemoryOperand(direct_address=address), 2

    components = lookup_effective_address(rm, start)

    if mod == 0b01:
        disp = sign_extend_8(read_le(data, pos, 1, "displacement", start))
        return MemoryOperand(components=components, displacement=disp), 1
    if mod == 0b10:
        disp = to_signed_16(read_le(data, pos, 2, "displacement", start))
        return MemoryOperand(components=components, displacement=disp), 2

    return MemoryOperand(components=components), 0


# @intent:responsibility 2バイトの直接アドレスを読み、メモリオペランドを返します（アキュムレータ形式用）。
def decode_direct_address(data: bytes, pos: int, start: int) -> OperandResult:
    address = read_le(data, pos, 2, "address", start)
    return MemoryOperand(direct_address=address), 2
