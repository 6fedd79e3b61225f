"""Use case: load one INI file into a caller-supplied record."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel

from ini_binder.l1_entities.errors import LoadError
from ini_binder.l2_use_cases.ports.config_loader import ConfigLoader
from ini_binder.l2_use_cases.schema_resolver import build_schema

log = logging.getLogger('ini_binder.load')


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one load — success, or the first error that aborted it."""

    path: Path
    error: LoadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LoadIniUseCase:
    """Runs one load through the config loader and reports the outcome."""

    def __init__(self, config_loader: ConfigLoader) -> None:
        self._loader = config_loader

    def execute(self, path: str | Path, target: BaseModel) -> LoadResult:
        """Populate *target* from *path*. Never raises LoadError; returns it instead."""
        path = Path(path)
        try:
            self._loader.load(path, target)
        except LoadError as e:
            log.error('Failed to load %s into %s: %s', path, type(target).__name__, e)
            return LoadResult(path=path, error=e)

        schema = build_schema(type(target))
        log.info(
            'Loaded %s into %s (sections: %s)',
            path,
            schema.record_type.__name__,
            ', '.join(schema.section_names()) or '-',
        )
        return LoadResult(path=path)
