# retro_disasm/arch/i8086/formatter.py
"""
デコード結果のテキスト表現を生成するモジュール。

出力形式は `MOV <転送先>, <転送元>` です。
"""
from typing import Optional

from retro_disasm.config.models import DisassemblerConfig
from retro_disasm.arch.i8086.model import (
    ImmediateOperand,
    Instruction,
    MemoryOperand,
    Operand,
    RegisterOperand,
    Width,
)

_DEFAULT_CONFIG = DisassemblerConfig()


def _case(text: str, config: DisassemblerConfig) -> str:
    return text if config.uppercase else text.lower()


# @intent:responsibility メモリオペランドを `[BX + SI + 4]` / `[0x0201]` 形式に変換します。
# @intent:note ディスプレースメント0は省略し、負値は `- n` と表記します。
def format_memory(operand: MemoryOperand, config: Optional[DisassemblerConfig] = None) -> str:
    config = config or _DEFAULT_CONFIG

    if operand.direct_address is not None:
        if config.address_format == "decimal":
            return f"[{operand.direct_address}]"
        return f"[0x{operand.direct_address:04X}]"

    expr = " + ".join(_case(name, config) for name in operand.components)
    disp = operand.displacement
    if disp:
        if not expr:
            expr = str(disp)
        elif disp < 0:
            expr += f" - {-disp}"
        else:
            expr += f" + {disp}"
    return f"[{expr}]"


# @intent:responsibility 単一のオペランドを文字列に変換します。
def format_operand(operand: Operand, config: Optional[DisassemblerConfig] = None) -> str:
    config = config or _DEFAULT_CONFIG
    if isinstance(operand, RegisterOperand):
        return _case(operand.name, config)
    if isinstance(operand, MemoryOperand):
        return format_memory(operand, config)
    if isinstance(operand, ImmediateOperand):
        return str(operand.value)
    raise TypeError(f"Unknown operand type: {type(operand).__name__}")


# @intent:responsibility 命令全体を1行のテキストに変換します。
def format_instruction(instruction: Instruction, config: Optional[DisassemblerConfig] = None) -> str:
    """
    例: `MOV CX, BX`, `MOV [BP + 10], CX`, `MOV AL, [0x0201]`
    """
    config = config or _DEFAULT_CONFIG
    dest = format_operand(instruction.destination, config)
    src = format_operand(instruction.source, config)

    # メモリへの即値転送はサイズが曖昧になるため、設定により byte/word を明示する
    if (
        config.size_keywords
        and isinstance(instruction.source, ImmediateOperand)
        and isinstance(instruction.destination, MemoryOperand)
    ):
        keyword = "word" if instruction.source.width is Width.WORD else "byte"
        src = f"{_case(keyword.upper(), config)} {src}"

    return f"{_case(instruction.mnemonic, config)} {dest}, {src}"
