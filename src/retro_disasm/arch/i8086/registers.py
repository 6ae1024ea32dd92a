# retro_disasm/arch/i8086/registers.py
"""
8086 レジスタ表と実効アドレス表。

どちらも3ビットのフィールド値をキーとする全域的な参照表です。
"""
from typing import Tuple

from retro_disasm.core.errors import InvalidFieldCombination
from retro_disasm.arch.i8086.model import RegisterName, Width

# @intent:map reg/rm コード (0-7) からレジスタ名への対応。列は Width の値で選択します。
REGISTER_TABLE = {
    Width.BYTE: ("AL", "CL", "DL", "BL", "AH", "CH", "DH", "BH"),
    Width.WORD: ("AX", "CX", "DX", "BX", "SP", "BP", "SI", "DI"),
}

# @intent:map r/m コード (0-7) から実効アドレス計算に使うレジスタの組への対応。
EFFECTIVE_ADDRESS_TABLE: Tuple[Tuple[RegisterName, ...], ...] = (
    ("BX", "SI"),
    ("BX", "DI"),
    ("BP", "SI"),
    ("BP", "DI"),
    ("SI",),
    ("DI",),
    ("BP",),
    ("BX",),
)

# mod=00, r/m=110 は BP ではなく直接アドレス
DIRECT_ADDRESS_MOD = 0b00
DIRECT_ADDRESS_RM = 0b110


# @intent:responsibility (幅, 3ビットコード) からレジスタ名を引きます。
# @intent:pre-condition code は 0-7。フィールド抽出が3ビット幅を保証します。
def lookup_register(width: Width, code: int, offset: int = -1) -> RegisterName:
    if not 0 <= code <= 7:
        raise InvalidFieldCombination(f"Register code {code} out of range", offset, code, "register")
    return REGISTER_TABLE[width][code]


# @intent:responsibility r/m コードから実効アドレスのレジスタ構成を引きます。
def lookup_effective_address(rm_code: int, offset: int = -1) -> Tuple[RegisterName, ...]:
    if not 0 <= rm_code <= 7:
        raise InvalidFieldCombination(f"r/m code {rm_code} out of range", offset, rm_code, "operand")
    return EFFECTIVE_ADDRESS_TABLE[rm_code]


# @intent:responsibility mod/rm の組が直接アドレス指定の特例に該当するか判定します。
def is_direct_address(mod: int, rm_code: int) -> bool:
    return mod == DIRECT_ADDRESS_MOD and rm_code == DIRECT_ADDRESS_RM


# @intent:responsibility アキュムレータ (AL/AX) の名前を返します。
def accumulator(width: Width) -> RegisterName:
    return REGISTER_TABLE[width][0]
