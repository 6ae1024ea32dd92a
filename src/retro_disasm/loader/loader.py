# retro_disasm/loader/loader.py
"""
プログラムローダーモジュール。
生バイナリおよび Intel HEX 形式のファイルを読み込み、バイト列とその原点アドレスを返します。
"""
import logging

from retro_disasm.common.types import LoadedImage

logger = logging.getLogger(__name__)

class BinaryLoader:
    """
    ファイル内容をそのまま命令バイト列として読み込むローダー。
    """
    def load_binary(self, file_path: str) -> bytes:
        with open(file_path, 'rb') as f:
            data = f.read()
        logger.info("Loaded %d bytes from %s", len(data), file_path)
        return data

class IntelHexLoader:
    """
    Intel HEX形式のファイルを解析し、連続したバイト列に展開するローダー。
    最小アドレスを先頭（原点）とし、データの無い隙間は0x00で埋めます。
    """
    def load_intel_hex(self, file_path: str) -> LoadedImage:
        with open(file_path, 'r') as f:
            return self.parse_intel_hex(f.read().splitlines())

    def parse_intel_hex(self, lines) -> LoadedImage:
        memory = {}
        segment_base = 0x0000

        for line_num, line in enumerate(lines, 1):
            line = line.strip()
            if not line or not line.startswith(':'):
                continue

            comment_start = line.find(';')
            if comment_start != -1:
                line = line[:comment_start].strip()

            if len(line) < 11:
                raise ValueError(f"Invalid Intel HEX record format on line {line_num}: Too short - {line}")

            try:
                data_length = int(line[1:3], 16)
                address_field = int(line[3:7], 16)
                record_type = int(line[7:9], 16)
                data_part = bytes.fromhex(line[9:-2])
                checksum_field = int(line[-2:], 16)
            except ValueError as e:
                raise ValueError(f"Error parsing Intel HEX line {line_num}: {line} - {e}") from e

            if len(data_part) != data_length:
                raise ValueError(f"Data length mismatch on line {line_num}")

            checksum_sum = data_length + (address_field >> 8) + (address_field & 0xFF) + record_type + sum(data_part)
            calculated_checksum = (~checksum_sum + 1) & 0xFF
            if calculated_checksum != checksum_field:
                raise ValueError(f"Checksum mismatch on line {line_num}: Calculated {calculated_checksum:02X}, Expected {checksum_field:02X}")

            if record_type == 0x00:
                load_address = segment_base + address_field
                for i, byte_data in enumerate(data_part):
                    memory[load_address + i] = byte_data
            elif record_type == 0x01:
                break
            elif record_type == 0x02:
                segment_base = int.from_bytes(data_part, "big") << 4
            elif record_type == 0x04:
                segment_base = int.from_bytes(data_part, "big") << 16
            elif record_type in (0x03, 0x05):
                pass  # 開始アドレスは逆アセンブルでは使用しない
            else:
                raise ValueError(f"Unknown Intel HEX record type {record_type:02X} on line {line_num}")

        if not memory:
            return LoadedImage(b"", 0)

        start = min(memory)
        image = bytearray(max(memory) - start + 1)
        for address, value in memory.items():
            image[address - start] = value
        logger.info("Parsed Intel HEX image: %d bytes starting at %#06x", len(image), start)
        return LoadedImage(bytes(image), start)

# @intent:responsibility 入力形式に応じて適切なローダーを選択し、イメージを返します。生バイナリの原点は0です。
def load_program(file_path: str, input_format: str = "binary") -> LoadedImage:
    if input_format == "binary":
        return LoadedImage(BinaryLoader().load_binary(file_path), 0)
    if input_format == "ihex":
        return IntelHexLoader().load_intel_hex(file_path)
    raise ValueError(f"Unsupported input format: {input_format}")
