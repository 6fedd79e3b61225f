"""Line-oriented INI parser that binds values into a caller-owned record."""

from __future__ import annotations

from pydantic import BaseModel

from ini_binder.l1_entities.errors import IniSyntaxError, SchemaError, ValueTypeError
from ini_binder.l1_entities.parse_cursor import ParseCursor
from ini_binder.l1_entities.schema import RecordSchema, SectionBinding
from ini_binder.l2_use_cases.schema_resolver import build_schema, resolve_key, resolve_section

LINE_SEPARATOR = '\r\n'
COMMENT_PREFIXES = (';', '#')


def ensure_record(target: object) -> BaseModel:
    """Reject anything that is not a record instance the loader can mutate."""
    if not isinstance(target, BaseModel):
        raise SchemaError(f'target must be a record reference, got {type(target).__name__}')
    if target.model_config.get('frozen'):
        raise SchemaError(f'target {type(target).__name__} is frozen and cannot be written')
    return target


def parse_into(text: str, target: BaseModel) -> RecordSchema:
    """Scan *text* line by line and write bound values into *target*.

    Aborts on the first syntax, value or schema error; *target* keeps
    whatever was written before the failing line.
    """
    record = ensure_record(target)
    schema = build_schema(type(record))
    cursor = ParseCursor()

    for idx, raw_line in enumerate(text.split(LINE_SEPARATOR)):
        cursor.line = idx + 1
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        if line.startswith('['):
            _enter_section(line, schema, cursor)
        else:
            _assign(line, record, cursor)
    return schema


def _enter_section(line: str, schema: RecordSchema, cursor: ParseCursor) -> None:
    if not line.endswith(']'):
        raise IniSyntaxError(cursor.line, 'section header is missing a closing "]"')
    name = line[1:-1].strip()
    if not name:
        raise IniSyntaxError(cursor.line, 'empty section name')
    cursor.enter(resolve_section(schema, name))


def _assign(line: str, record: BaseModel, cursor: ParseCursor) -> None:
    if '=' not in line or line.startswith('='):
        raise IniSyntaxError(cursor.line, 'expected "key = value"')
    key, _, value = line.partition('=')
    key = key.strip()
    value = value.strip()

    if not cursor.seen_header:
        raise IniSyntaxError(cursor.line, f'key {key!r} appears before any section header')
    section = cursor.section
    if section is None:
        return  # inside an unrecognised section
    nested = _nested_record(record, section)
    binding = resolve_key(section, key)
    if binding is None:
        return
    try:
        binding.apply(nested, value)
    except ValueError as e:
        raise ValueTypeError(cursor.line, key, value, binding.kind.value) from e


def _nested_record(record: BaseModel, section: SectionBinding) -> BaseModel:
    if not section.is_record:
        raise SchemaError(
            f'field {type(record).__name__}.{section.field_name} bound to section '
            f'{section.section!r} should be a record'
        )
    nested = getattr(record, section.field_name)
    if not isinstance(nested, BaseModel):
        raise SchemaError(
            f'field {type(record).__name__}.{section.field_name} holds {type(nested).__name__}, not a record instance'
        )
    if nested.model_config.get('frozen'):
        raise SchemaError(f'section record {type(nested).__name__} is frozen and cannot be written')
    return nested
