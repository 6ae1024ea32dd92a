# tests/test_cli.py
"""
retro_disasm.cliモジュールの結合テスト。
ファイル読み込みから標準出力への書き出しまでを検証します。
"""
import pytest

from retro_disasm.cli import main

# @intent:test_suite コマンドライン経由の逆アセンブルの検証。

@pytest.fixture
def program(tmp_path):
    path = tmp_path / "listing.bin"
    path.write_bytes(bytes([0x89, 0xD9, 0xA0, 0x01, 0x02]))
    return path

def test_prints_header_and_instructions(program, capsys):
    assert main([str(program)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["bits 16", "", "MOV CX, BX", "MOV AL, [0x0201]"]

def test_listing_mode(program, capsys):
    assert main([str(program), "--listing"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[2].startswith("0000  89 D9")
    assert out[2].endswith("MOV CX, BX")
    assert out[3].startswith("0002  A0 01 02")

def test_config_file(program, tmp_path, capsys):
    config_file = tmp_path / "disasm.yaml"
    config_file.write_text("output:\n  header: ''\n  uppercase: false\n  address_format: decimal\n")
    assert main([str(program), "-c", str(config_file)]) == 0
    assert capsys.readouterr().out.splitlines() == ["mov cx, bx", "mov al, [513]"]

# @intent:test_case_decode_error デコード失敗時は途中までの出力を残し、終了コード1を返すことを検証します。
def test_decode_error(tmp_path, capsys):
    path = tmp_path / "bad.bin"
    path.write_bytes(bytes([0x89, 0xD9, 0x90]))
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "MOV CX, BX" in captured.out
    assert "Unsupported opcode" in captured.err

def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.bin")]) == 1
    assert "Error" in capsys.readouterr().err

# @intent:test_case_config_error 設定ファイルの問題はトレースバックではなく終了コード1で報告されることを検証します。
def test_missing_config_file(program, tmp_path, capsys):
    assert main([str(program), "-c", str(tmp_path / "nonexistent.yaml")]) == 1
    captured = capsys.readouterr()
    assert "Error: invalid config" in captured.err
    assert captured.out == ""

def test_invalid_address_format_in_config(program, tmp_path, capsys):
    config_file = tmp_path / "disasm.yaml"
    config_file.write_text("output:\n  address_format: octal\n")
    assert main([str(program), "-c", str(config_file)]) == 1
    assert "Error: invalid config" in capsys.readouterr().err

def test_malformed_yaml_config(program, tmp_path, capsys):
    config_file = tmp_path / "disasm.yaml"
    config_file.write_text("output: [unclosed\n")
    assert main([str(program), "-c", str(config_file)]) == 1
    assert "Error: invalid config" in capsys.readouterr().err

# @intent:test_case_origin Intel HEX の原点アドレスからリストのアドレスが始まることを検証します。
def test_intel_hex_listing_starts_at_origin(tmp_path, capsys):
    hex_file = tmp_path / "listing.hex"
    hex_file.write_text(":0201000089D99B\n:00000001FF\n")
    config_file = tmp_path / "disasm.yaml"
    config_file.write_text("output:\n  header: ''\ninput:\n  format: ihex\n")
    assert main([str(hex_file), "-c", str(config_file), "--listing"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("0100  89 D9")
