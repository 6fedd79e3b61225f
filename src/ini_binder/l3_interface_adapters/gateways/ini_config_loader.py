"""Gateway: INI configuration loader — implements ConfigLoader port."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from ini_binder.l2_use_cases.ini_parser import ensure_record, parse_into
from ini_binder.l2_use_cases.ports.text_source import TextSource
from ini_binder.l3_interface_adapters.gateways.file_text_source import FileTextSource
from ini_binder.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


class IniConfigLoader:
    """Fills caller-owned records from CRLF-delimited INI files."""

    def __init__(self, text_source: TextSource | None = None) -> None:
        self._source = text_source or FileTextSource()

    def load(self, config_path: str | Path, target: BaseModel) -> None:
        ensure_record(target)
        parse_into(self._source.read(config_path), target)

    def loads(self, text: str, target: BaseModel) -> None:
        parse_into(text, target)


def find_default_config() -> Path | None:
    """First existing file among the default config locations, if any."""
    for default_path in DEFAULT_CONFIG_PATHS:
        if default_path.is_file():
            return default_path
    return None
