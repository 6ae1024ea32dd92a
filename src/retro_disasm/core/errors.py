# retro_disasm/core/errors.py
"""
デコードエラー定義

このモジュールは、命令デコード中に発生するエラーの型を定義します。
すべてのエラーは発生位置（バイトオフセット）、生のバイト値、デコード段階を保持し、
呼び出し元が原因を特定できるようにします。
"""
from typing import Optional


# @intent:responsibility デコードエラーの基底クラス。入力不正として ValueError を継承します。
class DecodeError(ValueError):
    """
    命令デコード中に発生したエラーの基底クラス。
    """
    def __init__(self, message: str, offset: int, value: Optional[int] = None, stage: str = ""):
        super().__init__(message)
        self.offset = offset
        self.value = value
        self.stage = stage


# @intent:responsibility 形式確定後に必要なバイトが入力末尾で不足したことを表します。
class TruncatedStream(DecodeError):
    def __init__(self, offset: int, stage: str, needed: int, available: int):
        super().__init__(
            f"Truncated stream at offset {offset:#06x} during {stage}: "
            f"needed {needed} byte(s), {available} available",
            offset,
            None,
            stage,
        )
        self.needed = needed
        self.available = available


# @intent:responsibility 先頭バイトが既知のMOVパターンのいずれにも一致しないことを表します。
class UnsupportedOpcode(DecodeError):
    def __init__(self, offset: int, value: int):
        super().__init__(
            f"Unsupported opcode {value:#04x} ({value:08b}) at offset {offset:#06x}",
            offset,
            value,
            "classify",
        )


# @intent:responsibility データモデルの不変条件に反するフィールドの組み合わせを表します。
# @intent:note テーブルの定義域から通常は到達しない。到達した場合は内部整合性の破綻を意味します。
class InvalidFieldCombination(DecodeError):
    def __init__(self, message: str, offset: int, value: Optional[int] = None, stage: str = ""):
        location = f" at offset {offset:#06x}" if offset >= 0 else ""
        super().__init__(f"{message}{location}", offset, value, stage)
