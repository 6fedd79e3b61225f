"""Gateway: filesystem text source — implements TextSource port."""

from __future__ import annotations

from pathlib import Path

from ini_binder.l1_entities.errors import ConfigIOError


class FileTextSource:
    """Reads a config file in full, keeping its line separators intact."""

    def __init__(self, encoding: str = 'utf-8-sig') -> None:
        self._encoding = encoding

    def read(self, path: str | Path) -> str:
        path = Path(path)
        try:
            # bytes, not read_text(): universal newlines would rewrite CRLF
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise ConfigIOError(path, 'file not found') from e
        except OSError as e:
            raise ConfigIOError(path, e.strerror or type(e).__name__) from e
        try:
            return data.decode(self._encoding)
        except UnicodeDecodeError as e:
            raise ConfigIOError(path, f'not valid {self._encoding}: {e.reason}') from e
