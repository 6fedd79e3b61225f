"""Schema entities — section and key bindings derived from record metadata."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel


class PrimitiveKind(enum.Enum):
    TEXT = 'text'
    INTEGER = 'integer'
    FLOAT = 'float'
    BOOLEAN = 'boolean'


@dataclass(frozen=True)
class Ini:
    """Field annotation naming the section (top level) or key (nested) a field binds to.

    Usage::

        class MysqlConfig(BaseModel):
            port: Annotated[int, Ini('port')] = 0
    """

    name: str


@dataclass(frozen=True)
class KeyBinding:
    """Binds one key of a section to a leaf field of the nested record."""

    key: str
    field_name: str
    kind: PrimitiveKind
    convert: Callable[[str], Any] = field(repr=False, compare=False)

    def apply(self, record: BaseModel, raw_value: str) -> None:
        """Convert *raw_value* and write it into *record*. Raises ValueError on bad input."""
        setattr(record, self.field_name, self.convert(raw_value))


@dataclass(frozen=True)
class SectionBinding:
    """Binds one section name to a top-level field of the target record.

    ``record_type`` is None when the field is not itself a record; such a
    section can be resolved but never written into.
    """

    section: str
    field_name: str
    record_type: type[BaseModel] | None
    keys: tuple[KeyBinding, ...] = ()

    @property
    def is_record(self) -> bool:
        return self.record_type is not None


@dataclass(frozen=True)
class RecordSchema:
    record_type: type[BaseModel]
    sections: tuple[SectionBinding, ...]

    def section_names(self) -> list[str]:
        return [s.section for s in self.sections]
