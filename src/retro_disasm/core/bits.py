# retro_disasm/core/bits.py
"""
ビットフィールド抽出

命令バイトから任意位置・任意幅のビット列を取り出すユーティリティです。
ビット位置はMSBを1とする1始まりの番号で指定します（命令フォーマット表の表記に合わせる）。
"""


# @intent:responsibility 1バイトからNビットの符号なしフィールドを取り出し、右詰めで返します。
# @intent:pre-condition 1 <= first_bit, 1 <= width, first_bit + width - 1 <= 8, 0 <= byte <= 0xFF
def extract_bits(byte: int, first_bit: int, width: int) -> int:
    """
    byte の first_bit ビット目（MSB=1）から width ビットを取り出します。

    例: extract_bits(0b10001001, 1, 6) == 0b100010
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"Value {byte} is not an 8-bit value.")
    if first_bit < 1 or width < 1 or first_bit + width - 1 > 8:
        raise ValueError(f"Bit range (first_bit={first_bit}, width={width}) exceeds byte bounds.")

    shift = 8 - (first_bit + width - 1)
    mask = (1 << width) - 1
    return (byte >> shift) & mask
