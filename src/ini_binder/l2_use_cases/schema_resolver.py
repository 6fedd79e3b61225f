"""Schema resolver — turns ``Ini`` field annotations into section and key bindings.

Operates on record classes only; never reads or writes parsed values.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from functools import lru_cache
from typing import Any

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ini_binder.l1_entities.errors import SchemaError
from ini_binder.l1_entities.schema import Ini, KeyBinding, PrimitiveKind, RecordSchema, SectionBinding

_INT_RE = re.compile(r'[+-]?[0-9]+')
_FLOAT_RE = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_FLOAT_WORDS = {'inf', '+inf', '-inf', 'infinity', '+infinity', '-infinity', 'nan', '+nan', '-nan'}
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_TRUE = {'1', 't', 'true'}
_FALSE = {'0', 'f', 'false'}


def parse_text(raw: str) -> str:
    return raw


def parse_integer(raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f'invalid integer literal: {raw!r}')
    value = int(raw, 10)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'integer out of range: {raw!r}')
    return value


def parse_float(raw: str) -> float:
    if not (_FLOAT_RE.fullmatch(raw) or raw.lower() in _FLOAT_WORDS):
        raise ValueError(f'invalid float literal: {raw!r}')
    value = float(raw)
    if math.isinf(value) and raw.lower() not in _FLOAT_WORDS:
        raise ValueError(f'float out of range: {raw!r}')
    return value


def parse_boolean(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f'invalid boolean literal: {raw!r}')


CONVERTERS: dict[PrimitiveKind, Callable[[str], Any]] = {
    PrimitiveKind.TEXT: parse_text,
    PrimitiveKind.INTEGER: parse_integer,
    PrimitiveKind.FLOAT: parse_float,
    PrimitiveKind.BOOLEAN: parse_boolean,
}

# Exact-type lookup: a bool field never falls through to integer parsing.
_KIND_BY_TYPE: dict[type, PrimitiveKind] = {
    str: PrimitiveKind.TEXT,
    bool: PrimitiveKind.BOOLEAN,
    int: PrimitiveKind.INTEGER,
    float: PrimitiveKind.FLOAT,
}


def ini_name(info: FieldInfo) -> str | None:
    """Return the name declared by an ``Ini`` marker on *info*, if any."""
    for meta in info.metadata:
        if isinstance(meta, Ini):
            return meta.name
    return None


def is_record_type(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


@lru_cache(maxsize=128)
def build_schema(record_type: type[BaseModel]) -> RecordSchema:
    """Derive the ordered section bindings of *record_type*.

    Raises SchemaError if *record_type* is not a record class, a section or
    key name is declared twice, or a bound leaf is frozen or has an
    unsupported type.
    """
    if not is_record_type(record_type):
        raise SchemaError(f'{record_type!r} is not a record type')

    sections: list[SectionBinding] = []
    seen: set[str] = set()
    for field_name, info in record_type.model_fields.items():
        section = ini_name(info)
        if section is None:
            continue
        if section in seen:
            raise SchemaError(f'section {section!r} is bound twice on {record_type.__name__}')
        seen.add(section)
        if is_record_type(info.annotation):
            sections.append(
                SectionBinding(
                    section=section,
                    field_name=field_name,
                    record_type=info.annotation,
                    keys=_build_keys(info.annotation),
                )
            )
        else:
            sections.append(SectionBinding(section=section, field_name=field_name, record_type=None))
    return RecordSchema(record_type=record_type, sections=tuple(sections))


def _build_keys(record_type: type[BaseModel]) -> tuple[KeyBinding, ...]:
    keys: list[KeyBinding] = []
    seen: set[str] = set()
    for field_name, info in record_type.model_fields.items():
        key = ini_name(info)
        if key is None:
            continue
        if key in seen:
            raise SchemaError(f'key {key!r} is bound twice on {record_type.__name__}')
        seen.add(key)
        if info.frozen:
            raise SchemaError(f'{record_type.__name__}.{field_name} is frozen and cannot be bound to key {key!r}')
        kind = _KIND_BY_TYPE.get(info.annotation)  # type: ignore[arg-type]
        if kind is None:
            raise SchemaError(
                f'{record_type.__name__}.{field_name} has unsupported type {info.annotation!r} '
                f'(expected str, int, float or bool)'
            )
        keys.append(KeyBinding(key=key, field_name=field_name, kind=kind, convert=CONVERTERS[kind]))
    return tuple(keys)


def resolve_section(schema: RecordSchema, section_name: str) -> SectionBinding | None:
    """First section binding whose name equals *section_name* exactly."""
    for binding in schema.sections:
        if binding.section == section_name:
            return binding
    return None


def resolve_key(section: SectionBinding, key_name: str) -> KeyBinding | None:
    """First key binding of *section* whose name equals *key_name* exactly."""
    for binding in section.keys:
        if binding.key == key_name:
            return binding
    return None
