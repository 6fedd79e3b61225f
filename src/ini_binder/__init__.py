"""ini-binder — load sectioned INI files into annotated pydantic records."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from ini_binder.l1_entities.errors import (
    ConfigIOError,
    IniSyntaxError,
    LoadError,
    SchemaError,
    ValueTypeError,
)
from ini_binder.l1_entities.schema import Ini, PrimitiveKind
from ini_binder.l3_interface_adapters.gateways.ini_config_loader import IniConfigLoader

__version__ = '0.1.0'

__all__ = [
    'ConfigIOError',
    'Ini',
    'IniConfigLoader',
    'IniSyntaxError',
    'LoadError',
    'PrimitiveKind',
    'SchemaError',
    'ValueTypeError',
    'load',
    'loads',
]


def load(path: str | Path, target: BaseModel) -> None:
    """Populate *target* in place from the INI file at *path*. Raises LoadError."""
    IniConfigLoader().load(path, target)


def loads(text: str, target: BaseModel) -> None:
    """Populate *target* in place from INI *text*. Raises LoadError."""
    IniConfigLoader().loads(text, target)
