"""Resolves a located tag against a field schema."""

from codizer.parser.base import FieldKind, FieldSchema, ParsedFields, RawTag, TagParseError
from codizer.parser.grammar import (
    decode_value,
    extract_array_field,
    extract_scalar_field,
    match_schema,
    normalize_body,
)


def resolve_fields(body: str, schema: FieldSchema) -> ParsedFields:
    """Resolve a raw tag body against `schema`.

    Raises TagParseError carrying the raw body when a required field is
    missing, fields are out of order, or a nested object is malformed.
    """
    normalized = normalize_body(body).strip()
    captures = match_schema(normalized, schema)
    if captures is None:
        raise TagParseError(_describe_mismatch(normalized, schema), body)

    try:
        return {spec.key: decode_value(spec, captures[spec.key]) for spec in schema.fields}
    except TagParseError as exc:
        raise TagParseError(str(exc), body) from exc


def resolve_tag(tag: RawTag, schema: FieldSchema) -> ParsedFields:
    return resolve_fields(tag.body, schema)


def _describe_mismatch(body: str, schema: FieldSchema) -> str:
    for spec in schema.fields:
        if not spec.required:
            continue
        if spec.kind in (FieldKind.SCALAR, FieldKind.BOOL):
            found = extract_scalar_field(body, spec.key)
        else:
            found = extract_array_field(body, spec.key)
        if found is None:
            return f"{schema.name} tag is missing required field '{spec.key}': {body}"
    return f"{schema.name} tag fields are malformed or out of order: {body}"
