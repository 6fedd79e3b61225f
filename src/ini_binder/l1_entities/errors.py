"""Domain error types raised while loading an INI file into a record."""

from __future__ import annotations

from pathlib import Path


class LoadError(Exception):
    """Base class for every failure of a single load call."""


class SchemaError(LoadError):
    """Raised when the target or its declared bindings cannot be used."""


class ConfigIOError(LoadError):
    """Raised when the config file cannot be read or decoded."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f'cannot read {self.path}: {reason}')


class IniSyntaxError(LoadError):
    """Raised on a malformed section header or assignment line."""

    def __init__(self, line: int, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f'line {line}: syntax error ({reason})')


class ValueTypeError(LoadError):
    """Raised when a value cannot be coerced into the bound field's kind."""

    def __init__(self, line: int, key: str, value: str, kind: str) -> None:
        self.line = line
        self.key = key
        self.value = value
        self.kind = kind
        super().__init__(f'line {line}: value type error ({key}={value!r} is not a valid {kind})')
