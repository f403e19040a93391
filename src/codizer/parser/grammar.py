"""Field grammar for tag bodies.

A tag body is a comma separated sequence of fields written in schema order:

    title='Add', tags=[math, 'core'], parameters=[{name='a', type='int'}]

Scalars are single-quoted and may span lines, arrays end at the first `]`
that lets the rest of the body match, and objects are one level deep.
Text before the first field and extra `key=` fields after the last one
are ignored.
"""

import re
from functools import lru_cache

from codizer.parser.base import FieldKind, FieldSchema, FieldSpec, FieldValue, ParsedFields, TagParseError

FIELD_SEPARATOR = r"\s*,\s*"

# Text before the first field and `, key=...` fields after the last one are ignored.
LEADING_TEXT = r"(?:.*?)"
TRAILING_FIELDS = r"(?:\s*,\s*\w+\s*=.*)?"

# Quoted values are opaque, so `schema='{"id": 1}'` stays inside its block.
_OBJECT_BLOCK = re.compile(r"\{((?:'[^']*'|[^'}])*)\}")


def normalize_body(body: str) -> str:
    """Trim every line of a tag body and rejoin with newlines."""
    return "\n".join(line.strip() for line in body.split("\n"))


def scalar_pattern(key: str) -> str:
    return rf"\b{key}='(?P<{key}>[^']*)'"


def array_pattern(key: str) -> str:
    return rf"\b{key}=\[(?P<{key}>.*?)\]"


def field_pattern(spec: FieldSpec) -> str:
    if spec.kind in (FieldKind.SCALAR, FieldKind.BOOL):
        return scalar_pattern(spec.key)
    return array_pattern(spec.key)


def extract_scalar_field(body: str, key: str) -> str | None:
    """Return the value of `key='...'` anywhere in the body, or None."""
    match = re.search(scalar_pattern(key), body)
    return match.group(key) if match else None


def extract_array_field(body: str, key: str) -> str | None:
    """Return the raw interior of `key=[...]` anywhere in the body, or None."""
    match = re.search(array_pattern(key), body, re.DOTALL)
    return match.group(key) if match else None


def decode_flat_array(raw: str) -> list[str]:
    """Split `a, 'b', c` into items, dropping one layer of single quotes."""
    items = []
    for item in raw.split(","):
        item = item.strip()
        if len(item) >= 2 and item.startswith("'") and item.endswith("'"):
            item = item[1:-1]
        if item:
            items.append(item)
    return items


def decode_object_array(raw: str, sub_schema: FieldSchema) -> list[ParsedFields]:
    """Decode every `{...}` block in `raw` with the sub-schema's grammar.

    Nested objects are not supported.
    """
    return [decode_fields(block.strip(), sub_schema) for block in _OBJECT_BLOCK.findall(raw)]


def decode_bool_field(value: str | None) -> bool:
    return value == "true"


def strip_literal_quotes(raw: str) -> str:
    return raw.replace("'", "")


@lru_cache(maxsize=None)
def compile_schema(schema: FieldSchema) -> re.Pattern:
    """Build one ordered pattern for a whole schema.

    Optional fields become optional groups that carry their own leading
    separator; the first field is always required. Undeclared text is
    tolerated before the first field and as extra `key=` fields after the
    last one. The pattern is still matched against the whole body so that
    array captures extend past a `]` inside a quoted value.
    """
    parts = [LEADING_TEXT]
    for index, spec in enumerate(schema.fields):
        fragment = field_pattern(spec)
        if index:
            fragment = FIELD_SEPARATOR + fragment
        parts.append(fragment if spec.required else f"(?:{fragment})?")
    parts.append(TRAILING_FIELDS)
    parts.append(r"\s*,?\s*")
    return re.compile("".join(parts), re.DOTALL)


def match_schema(body: str, schema: FieldSchema) -> dict[str, str | None] | None:
    """Match a normalized body against a schema, returning raw captures."""
    match = compile_schema(schema).fullmatch(body)
    return match.groupdict() if match else None


def decode_value(spec: FieldSpec, raw: str | None) -> FieldValue:
    """Decode one raw capture; absent optional fields get empty defaults."""
    if spec.kind is FieldKind.BOOL:
        return decode_bool_field(raw)
    if spec.kind is FieldKind.SCALAR:
        return raw if raw is not None else ""
    if spec.kind is FieldKind.RAW:
        return strip_literal_quotes(raw) if raw is not None else ""
    if raw is None:
        return []
    if spec.kind is FieldKind.STRING_ARRAY:
        return decode_flat_array(raw)
    return decode_object_array(raw, spec.sub_schema)


def decode_fields(body: str, schema: FieldSchema) -> ParsedFields:
    """Match and decode a normalized body in one step."""
    captures = match_schema(body, schema)
    if captures is None:
        raise TagParseError(f"{schema.name} entry did not match: {body}", body)
    return {spec.key: decode_value(spec, captures[spec.key]) for spec in schema.fields}
