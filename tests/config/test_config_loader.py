# tests/config/test_config_loader.py
"""
retro_disasm.configパッケージの単体テスト。
YAML設定ファイルの読み込みと検証を確認します。
"""
import pytest

from retro_disasm.config.loader import ConfigLoader
from retro_disasm.config.models import DisassemblerConfig

# @intent:test_suite 逆アセンブラ設定の読み込み機能の検証。

class TestConfigLoader:
    @pytest.fixture
    def loader(self):
        return ConfigLoader()

    def test_defaults(self):
        config = DisassemblerConfig()
        assert config.header == "bits 16"
        assert config.uppercase
        assert config.address_format == "hex"
        assert not config.size_keywords
        assert config.input_format == "binary"
        assert config.base_address == 0

    def test_load_from_file(self, loader, tmp_path):
        config_file = tmp_path / "disasm.yaml"
        config_file.write_text(
            "output:\n"
            "  header: ''\n"
            "  uppercase: false\n"
            "  address_format: decimal\n"
            "  size_keywords: true\n"
            "input:\n"
            "  format: ihex\n"
            "  base_address: '0x0100'\n"
        )

        config = loader.load_from_file(str(config_file))

        assert config.header == ""
        assert not config.uppercase
        assert config.address_format == "decimal"
        assert config.size_keywords
        assert config.input_format == "ihex"
        assert config.base_address == 0x0100

    def test_empty_document_uses_defaults(self, loader, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert loader.load_from_file(str(config_file)) == DisassemblerConfig()

    def test_null_header_disables_header(self, loader):
        assert loader.load_from_string("output:\n  header: null\n").header == ""

    def test_integer_base_address(self, loader):
        assert loader.load_from_string("input:\n  base_address: 256\n").base_address == 256

    # @intent:test_case_invalid 不正な値は ValueError になることを検証します。
    def test_invalid_address_format(self, loader):
        with pytest.raises(ValueError):
            loader.load_from_string("output:\n  address_format: octal\n")

    def test_invalid_input_format(self, loader):
        with pytest.raises(ValueError):
            loader.load_from_string("input:\n  format: elf\n")

    def test_invalid_base_address(self, loader):
        with pytest.raises(ValueError):
            loader.load_from_string("input:\n  base_address: [1, 2]\n")
        with pytest.raises(ValueError):
            loader.load_from_string("input:\n  base_address: true\n")

    def test_non_mapping_root(self, loader):
        with pytest.raises(ValueError):
            loader.load_from_string("- a\n- b\n")

    # @intent:test_case_bool 真偽値は YAML の bool のみを受け付けることを検証します。
    def test_quoted_bool_is_rejected(self, loader):
        with pytest.raises(ValueError, match="Invalid boolean format"):
            loader.load_from_string("output:\n  uppercase: 'false'\n")
        with pytest.raises(ValueError, match="Invalid boolean format"):
            loader.load_from_string("output:\n  size_keywords: 'no'\n")
        with pytest.raises(ValueError):
            loader.load_from_string("output:\n  uppercase: 0\n")

    def test_plain_bool_is_accepted(self, loader):
        config = loader.load_from_string("output:\n  uppercase: false\n  size_keywords: yes\n")
        assert config.uppercase is False
        assert config.size_keywords is True
