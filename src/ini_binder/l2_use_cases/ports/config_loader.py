"""Port: configuration loader."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pydantic import BaseModel


class ConfigLoader(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract loader that fills an existing record from a config source."""

    def load(self, config_path: str | Path, target: BaseModel) -> None:
        """Populate *target* from the file at *config_path*. Raises LoadError."""
        ...

    def loads(self, text: str, target: BaseModel) -> None:
        """Populate *target* from in-memory *text*. Raises LoadError."""
        ...
