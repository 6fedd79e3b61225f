"""Shared path constants for configuration lookup."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_path

CONFIG_DIR = user_config_path('ini-binder')

# Relative entry resolves against the working directory at lookup time.
DEFAULT_CONFIG_PATHS = [
    Path('conf.ini'),
    CONFIG_DIR / 'config.ini',
    CONFIG_DIR / 'conf.ini',
]
