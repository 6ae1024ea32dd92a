# retro_disasm/arch/i8086/instructions/mov.py
"""
MOV 命令の各エンコード形式のデコード実装。

各関数は (opcode, data, start) を受け取り、Instruction を返します。
start は先頭バイトの位置で、消費バイト数は Instruction.length で得られます。
"""
from retro_disasm.core.bits import extract_bits
from retro_disasm.core.errors import InvalidFieldCombination
from retro_disasm.arch.i8086.model import ImmediateOperand, Instruction, RegisterOperand, Width
from retro_disasm.arch.i8086.registers import accumulator, lookup_register
from .base import decode_direct_address, decode_rm_operand, read_le, split_modrm


# @intent:responsibility 消費したバイト範囲を raw として持つ Instruction を生成します。
def _build(data: bytes, start: int, length: int, destination, source) -> Instruction:
    return Instruction(
        destination=destination,
        source=source,
        offset=start,
        raw=bytes(data[start:start + length]),
    )


# --- 100010dw: reg/mem <-> reg ---
# @intent:responsibility レジスタ/メモリ と レジスタ 間の MOV をデコードします。
# @intent:note d=1 なら reg フィールドが転送先、d=0 なら r/m 側が転送先。
def decode_mov_rm_reg(opcode: int, data: bytes, start: int) -> Instruction:
    d = extract_bits(opcode, 7, 1)
    width = Width.from_bit(extract_bits(opcode, 8, 1))

    modrm = read_le(data, start + 1, 1, "operand", start)
    mod, reg, rm = split_modrm(modrm)

    reg_operand = RegisterOperand(lookup_register(width, reg, start), width)
    rm_operand, consumed = decode_rm_operand(data, start + 2, mod, rm, width, start)

    if d:
        return _build(data, start, 2 + consumed, reg_operand, rm_operand)
    return _build(data, start, 2 + consumed, rm_operand, reg_operand)


# --- 1011wreg: imm -> reg ---
# @intent:responsibility 即値からレジスタへの MOV をデコードします。
# @intent:note wビットは5ビット目、レジスタコードは6〜8ビット目 (標準の 1011 w reg 配置)。
def decode_mov_imm_reg(opcode: int, data: bytes, start: int) -> Instruction:
    width = Width.from_bit(extract_bits(opcode, 5, 1))
    reg = extract_bits(opcode, 6, 3)

    value = read_le(data, start + 1, width.byte_count, "immediate", start)

    destination = RegisterOperand(lookup_register(width, reg, start), width)
    return _build(data, start, 1 + width.byte_count, destination, ImmediateOperand(value, width))


# --- 1100011w: imm -> reg/mem ---
# @intent:responsibility 即値からレジスタ/メモリへの MOV をデコードします。
# @intent:pre-condition 2バイト目の reg フィールドは 000 であること。
def decode_mov_imm_rm(opcode: int, data: bytes, start: int) -> Instruction:
    width = Width.from_bit(extract_bits(opcode, 8, 1))

    modrm = read_le(data, start + 1, 1, "operand", start)
    mod, reg, rm = split_modrm(modrm)
    if reg != 0:
        raise InvalidFieldCombination(
            f"Immediate MOV requires reg field 000, got {reg:03b}", start, modrm, "operand"
        )

    destination, consumed = decode_rm_operand(data, start + 2, mod, rm, width, start)

    imm_pos = start + 2 + consumed
    value = read_le(data, imm_pos, width.byte_count, "immediate", start)

    length = 2 + consumed + width.byte_count
    return _build(data, start, length, destination, ImmediateOperand(value, width))


# --- 1010000w: mem -> acc ---
# @intent:responsibility メモリからアキュムレータ (AL/AX) への MOV をデコードします。
def decode_mov_mem_acc(opcode: int, data: bytes, start: int) -> Instruction:
    width = Width.from_bit(extract_bits(opcode, 8, 1))
    source, consumed = decode_direct_address(data, start + 1, start)
    destination = RegisterOperand(accumulator(width), width)
    return _build(data, start, 1 + consumed, destination, source)


# --- 1010001w: acc -> mem ---
# @intent:responsibility アキュムレータ (AL/AX) からメモリへの MOV をデコードします。
def decode_mov_acc_mem(opcode: int, data: bytes, start: int) -> Instruction:
    width = Width.from_bit(extract_bits(opcode, 8, 1))
    destination, consumed = decode_direct_address(data, start + 1, start)
    source = RegisterOperand(accumulator(width), width)
    return _build(data, start, 1 + consumed, destination, source)
