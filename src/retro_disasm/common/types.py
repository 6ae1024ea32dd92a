"""
共通の型定義を提供するモジュール。
プロジェクト全体で使用される汎用的な型エイリアスなどを定義します。
"""
from typing import NamedTuple

# @intent:data_structure 逆アセンブルリストの1行。Disassembler, CLI, UIで共通して使用されます。
class ListingLine(NamedTuple):
    address: int
    hex_dump: str  # 例: "89 D9"
    text: str      # 例: "MOV CX, BX"

# @intent:data_structure 読み込んだプログラムイメージ。origin はイメージ先頭バイトのアドレス。
class LoadedImage(NamedTuple):
    data: bytes
    origin: int = 0
