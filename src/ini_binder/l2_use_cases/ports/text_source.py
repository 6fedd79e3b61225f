"""Port: text source for configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class TextSource(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract reader returning a whole config file as text."""

    def read(self, path: str | Path) -> str:
        """Read the full file. Raises ConfigIOError on failure."""
        ...
