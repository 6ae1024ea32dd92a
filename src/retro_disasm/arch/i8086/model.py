# retro_disasm/arch/i8086/model.py
"""
8086 デコード結果のデータモデル

デコードされた命令とオペランドを表す不変データ構造を定義します。
すべてのインスタンスは1命令ごとに新規生成され、命令間で状態を共有しません。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from retro_disasm.core.errors import InvalidFieldCombination

# @intent:data_structure レジスタ名 ("AL".."BH", "AX".."DI")。テーブル参照でのみ生成されます。
RegisterName = str


# @intent:responsibility オペランド幅（wビット）を表します。
class Width(Enum):
    BYTE = 0
    WORD = 1

    # @intent:responsibility wビットの値から幅を得ます。
    @classmethod
    def from_bit(cls, w: int) -> "Width":
        return cls.WORD if w else cls.BYTE

    # @intent:responsibility 即値・ディスプレースメントとして読み出すバイト数 (1 or 2)。
    @property
    def byte_count(self) -> int:
        return 2 if self is Width.WORD else 1


# @intent:responsibility レジスタ直接オペランド。
@dataclass(frozen=True)
class RegisterOperand:
    name: RegisterName
    width: Width


# @intent:responsibility メモリオペランド。
# @intent:invariant direct_address が設定されている場合、components は空、displacement は None。
@dataclass(frozen=True)
class MemoryOperand:
    """
    ベース/インデックスレジスタ（0〜2個）とディスプレースメント、
    または絶対アドレスで表されるメモリオペランド。

    displacement はエンコードにディスプレースメントバイトが存在した場合のみ設定されます
    （値が0でも None とは区別されます）。
    """
    components: Tuple[RegisterName, ...] = ()
    displacement: Optional[int] = None
    direct_address: Optional[int] = None

    def __post_init__(self):
        if self.direct_address is not None and (self.components or self.displacement is not None):
            raise InvalidFieldCombination(
                "A direct address cannot be combined with base registers or a displacement", -1, None, "operand"
            )

    @property
    def is_direct(self) -> bool:
        return self.direct_address is not None


# @intent:responsibility 即値オペランド。値はエンコードされたビットパターンそのもの（符号拡張なし）。
@dataclass(frozen=True)
class ImmediateOperand:
    value: int
    width: Width


Operand = Union[RegisterOperand, MemoryOperand, ImmediateOperand]


# @intent:responsibility デコード済みの1命令を記録します。
@dataclass(frozen=True)
class Instruction:
    """
    デコードされた1命令。

    offset は入力ストリーム上の先頭バイト位置、raw は命令が消費したバイト列です。
    """
    destination: Operand
    source: Operand
    offset: int = 0
    raw: bytes = b""
    mnemonic: str = "MOV"

    @property
    def length(self) -> int:
        return len(self.raw)

    # @intent:responsibility 16進ダンプ文字列 ("89 D9" 形式) を返します。
    def hex_dump(self) -> str:
        return " ".join(f"{b:02X}" for b in self.raw)
