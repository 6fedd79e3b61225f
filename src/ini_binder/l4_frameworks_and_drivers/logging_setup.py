"""Logging setup — level parsing and handler wiring for the ``ini_binder`` logger tree."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = '%(asctime)s %(levelname)s [%(filename)s:%(funcName)s:%(lineno)d] %(message)s'

_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'fatal': logging.CRITICAL,
}


def parse_log_level(name: str) -> int:
    """Map a case-insensitive level name to a ``logging`` level."""
    try:
        return _LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"invalid log level '{name}' (choose from {', '.join(_LEVELS)})") from None


def setup_logging(level: str = 'info', log_file: Path | None = None) -> logging.Logger:
    """Attach one handler to the ``ini_binder`` logger: stderr, or *log_file* when given."""
    level_no = parse_log_level(level)
    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding='utf-8')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger('ini_binder')
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    root.setLevel(level_no)
    root.addHandler(handler)
    return root
