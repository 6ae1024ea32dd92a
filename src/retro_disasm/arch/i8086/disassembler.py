"""
8086 MOV 逆アセンブラモジュール。

バイト列を先頭から順にデコードし、各命令を出力先 (sink) に渡します。
カーソル（位置インデックス）は Disassembler だけが保持し、単調に進みます。
"""
import logging
from enum import Enum
from typing import Callable, List, Optional

from retro_disasm.common.types import ListingLine
from retro_disasm.config.models import DisassemblerConfig
from retro_disasm.core.errors import DecodeError
from retro_disasm.arch.i8086.model import Instruction
from retro_disasm.arch.i8086.instructions import decode_instruction
from retro_disasm.arch.i8086.formatter import format_instruction

logger = logging.getLogger(__name__)


# @intent:responsibility 駆動ループの状態を定義します。
class DisassemblerState(Enum):
    READING = "READING"  # 未読バイトが残っている
    DONE = "DONE"        # カーソルが終端に到達した


# @intent:responsibility バイト列全体を1命令ずつデコードし、出力先へ転送します。
class Disassembler:
    """
    入力バイト列とカーソルを保持し、終端まで、または最初のデコード失敗まで命令をデコードします。
    """
    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._cursor = 0
        self._state = DisassemblerState.DONE if not self._data else DisassemblerState.READING

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def state(self) -> DisassemblerState:
        return self._state

    # @intent:responsibility 1命令をデコードし、カーソルを消費バイト数だけ進めます。
    # @intent:post-condition 終端に達していれば None を返し DONE へ遷移します。
    #                        命令途中で終端に達した場合は TruncatedStream が送出され、カーソルは動きません。
    def step(self) -> Optional[Instruction]:
        if self._cursor >= len(self._data):
            self._state = DisassemblerState.DONE
            return None

        instruction, consumed = decode_instruction(self._data, self._cursor)
        logger.debug("%04X: %s (%d bytes)", self._cursor, instruction.hex_dump(), consumed)
        self._cursor += consumed

        if self._cursor >= len(self._data):
            self._state = DisassemblerState.DONE
        return instruction

    # @intent:responsibility 終端までデコードを繰り返し、各命令を sink に渡します。
    def run(self, sink: Callable[[Instruction], None]) -> int:
        """
        デコードした命令数を返します。
        デコードに失敗した場合はエラーをログに記録して再送出します（読み飛ばしはしない）。
        """
        count = 0
        while self._state is DisassemblerState.READING:
            try:
                instruction = self.step()
            except DecodeError as e:
                logger.error("Decode halted at offset %#06x (%s): %s", e.offset, e.stage, e)
                raise
            if instruction is None:
                break
            sink(instruction)
            count += 1
        return count


# @intent:responsibility バイト列をデコードし、命令のリストを返します。
def decode_all(data: bytes) -> List[Instruction]:
    instructions: List[Instruction] = []
    Disassembler(data).run(instructions.append)
    return instructions


# @intent:responsibility リスト表示の起点アドレスを決定します。
# @intent:note config.base_address が 0 以外なら優先し、そうでなければ読み込み時の原点を使います。
def resolve_base_address(config: DisassemblerConfig, origin: int = 0) -> int:
    return config.base_address if config.base_address else origin


# @intent:responsibility 1命令をリストの1行 (アドレス, HEX, ニーモニック) に変換します。
def listing_line(instruction: Instruction, config: DisassemblerConfig, base_address: int = 0) -> ListingLine:
    return ListingLine(
        base_address + instruction.offset,
        instruction.hex_dump(),
        format_instruction(instruction, config),
    )


# @intent:responsibility バイト列を (アドレス, HEX, ニーモニック) のリストに変換します。
def disassemble(data: bytes, config: Optional[DisassemblerConfig] = None, origin: int = 0) -> List[ListingLine]:
    """
    メモリを解析し、(アドレス, HEX, ニーモニック) のリストを返します。
    アドレスの起点は resolve_base_address(config, origin) で決まります。
    """
    config = config or DisassemblerConfig()
    base_address = resolve_base_address(config, origin)
    results: List[ListingLine] = []
    Disassembler(data).run(lambda instruction: results.append(listing_line(instruction, config, base_address)))
    return results


# @intent:responsibility ヘッダ行を含むアセンブリ形式のテキスト行を返します。
def disassemble_text(data: bytes, config: Optional[DisassemblerConfig] = None, origin: int = 0) -> List[str]:
    config = config or DisassemblerConfig()
    lines = [config.header, ""] if config.header else []
    lines.extend(line.text for line in disassemble(data, config, origin))
    return lines
