"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import BaseModel

from ini_binder.l1_entities.errors import ConfigIOError, LoadError

SAMPLE_LINES = [
    '[mysql]',
    'address = 127.0.0.1',
    'port = 3306',
    '[redis]',
    'host = 127.0.0.1',
    'port = 6379',
    'database = 0',
    'test = true',
]

# --- Protocol-conforming Fakes ---


class FakeTextSource:
    """Fake text source for L2 use case tests — serves in-memory files."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self._files = dict(files or {})
        self.read_calls: list[Path] = []

    def read(self, path: str | Path) -> str:
        path = Path(path)
        self.read_calls.append(path)
        if str(path) not in self._files:
            raise ConfigIOError(path, 'file not found')
        return self._files[str(path)]


class FakeConfigLoader:
    """Fake config loader for use case tests — records calls, optionally fails."""

    def __init__(self, error: LoadError | None = None) -> None:
        self._error = error
        self.load_calls: list[tuple[Path, BaseModel]] = []
        self.loads_calls: list[tuple[str, BaseModel]] = []

    def load(self, config_path: str | Path, target: BaseModel) -> None:
        self.load_calls.append((Path(config_path), target))
        if self._error is not None:
            raise self._error

    def loads(self, text: str, target: BaseModel) -> None:
        self.loads_calls.append((text, target))
        if self._error is not None:
            raise self._error


# --- Helpers ---


def crlf(*lines: str) -> str:
    """Join *lines* with CRLF and terminate the last one."""
    return '\r\n'.join(lines) + '\r\n'


def write_ini(path: Path, *lines: str) -> Path:
    # write_bytes keeps CRLF exactly as given
    path.write_bytes(crlf(*lines).encode('utf-8'))
    return path


# --- Standard Fixtures ---


@pytest.fixture
def sample_text() -> str:
    return crlf(*SAMPLE_LINES)


@pytest.fixture
def sample_ini(tmp_path: Path) -> Path:
    return write_ini(tmp_path / 'conf.ini', *SAMPLE_LINES)


@pytest.fixture
def fake_source(sample_text: str) -> FakeTextSource:
    return FakeTextSource({'conf.ini': sample_text})


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers that setup_logging() attached during a test."""
    yield
    root = logging.getLogger('ini_binder')
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
