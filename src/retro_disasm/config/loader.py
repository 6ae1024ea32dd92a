import logging
import yaml
from typing import Dict, Any
from .models import DisassemblerConfig

logger = logging.getLogger(__name__)

class ConfigLoader:
    def load_from_file(self, path: str) -> DisassemblerConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        logger.info("Loaded disassembler config from %s", path)
        return self._parse_config(data or {})

    def load_from_string(self, text: str) -> DisassemblerConfig:
        return self._parse_config(yaml.safe_load(text) or {})

    def _parse_config(self, data: Dict[str, Any]) -> DisassemblerConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        defaults = DisassemblerConfig()
        output = data.get("output", {}) or {}
        input_data = data.get("input", {}) or {}

        header = output.get("header", defaults.header)

        return DisassemblerConfig(
            header="" if header is None else str(header),
            uppercase=self._parse_bool(output.get("uppercase", defaults.uppercase)),
            address_format=str(output.get("address_format", defaults.address_format)).lower(),
            size_keywords=self._parse_bool(output.get("size_keywords", defaults.size_keywords)),
            input_format=str(input_data.get("format", defaults.input_format)).lower(),
            base_address=self._parse_int(input_data.get("base_address", defaults.base_address)),
        )

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")

    def _parse_bool(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        raise ValueError(f"Invalid boolean format: {value!r}")
