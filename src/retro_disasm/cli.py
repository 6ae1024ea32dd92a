# src/retro_disasm/cli.py
"""
コマンドラインのエントリポイント。
ファイルを読み込み、逆アセンブル結果を標準出力に書き出します。
"""
import argparse
import logging
import sys
from typing import List, Optional

import yaml

from retro_disasm.config.loader import ConfigLoader
from retro_disasm.config.models import DisassemblerConfig
from retro_disasm.core.errors import DecodeError
from retro_disasm.loader.loader import load_program
from retro_disasm.arch.i8086.disassembler import Disassembler, listing_line, resolve_base_address


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="retro-disasm", description="Disassemble 8086 MOV instructions.")
    parser.add_argument("infile", help="binary (or Intel HEX) file to disassemble")
    parser.add_argument("-c", "--config", help="YAML config file")
    parser.add_argument("--listing", action="store_true", help="prefix each line with offset and bytes")
    parser.add_argument("--gui", action="store_true", help="open the listing viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


# @intent:responsibility 引数を解析し、逆アセンブルを実行します。終了ステータスを返します。
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = ConfigLoader().load_from_file(args.config) if args.config else DisassemblerConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid config: {e}", file=sys.stderr)
        return 1

    if args.gui:
        from retro_disasm.ui.app import main as gui_main
        return gui_main([args.infile], config)

    try:
        image = load_program(args.infile, config.input_format)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if config.header:
        print(config.header)
        print()

    base_address = resolve_base_address(config, image.origin)

    def emit(instruction) -> None:
        line = listing_line(instruction, config, base_address)
        if args.listing:
            print(f"{line.address:04X}  {line.hex_dump:<18}{line.text}")
        else:
            print(line.text)

    try:
        Disassembler(image.data).run(emit)
    except DecodeError as e:
        # 途中までの出力は保持したまま、エラー内容のみ報告する
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
