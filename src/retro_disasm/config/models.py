from dataclasses import dataclass

ADDRESS_FORMATS = ("hex", "decimal")
INPUT_FORMATS = ("binary", "ihex")

@dataclass
class DisassemblerConfig:
    header: str = "bits 16"  # 空文字ならヘッダ行を出力しない
    uppercase: bool = True
    address_format: str = "hex"  # "hex", "decimal"
    size_keywords: bool = False  # メモリ転送先の即値に byte/word を付ける
    input_format: str = "binary"  # "binary", "ihex"
    base_address: int = 0x0000  # リスト表示のオフセット起点

    def __post_init__(self):
        if self.address_format not in ADDRESS_FORMATS:
            raise ValueError(f"Unsupported address format: {self.address_format}")
        if self.input_format not in INPUT_FORMATS:
            raise ValueError(f"Unsupported input format: {self.input_format}")
