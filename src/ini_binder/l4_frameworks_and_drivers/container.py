"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from ini_binder.l2_use_cases.load_ini_use_case import LoadIniUseCase
from ini_binder.l2_use_cases.ports.config_loader import ConfigLoader
from ini_binder.l2_use_cases.ports.text_source import TextSource
from ini_binder.l3_interface_adapters.gateways.file_text_source import FileTextSource
from ini_binder.l3_interface_adapters.gateways.ini_config_loader import IniConfigLoader


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, text_source: TextSource | None = None) -> None:
        self.text_source: TextSource = text_source or FileTextSource()
        self.config_loader: ConfigLoader = IniConfigLoader(self.text_source)
        self.load_use_case = LoadIniUseCase(self.config_loader)
