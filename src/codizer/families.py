"""Tag families: marker, accepted tag shapes and output conventions."""

from datetime import datetime
from pathlib import Path
from typing import Callable, Union

from pydantic import BaseModel

from codizer.generator.builder import build_endpoint_doc, build_function_doc
from codizer.generator.markdown import render_endpoint_doc, render_endpoint_summary, render_function_doc
from codizer.parser.base import EndpointDoc, FieldSchema, FunctionDoc, ParsedFields, RawTag, TagParseError
from codizer.parser.resolver import resolve_tag
from codizer.parser.schemas import ENDPOINT_SCHEMA, ENDPOINT_SUMMARY_SCHEMA, FUNCTION_SCHEMA

Document = Union[FunctionDoc, EndpointDoc]


class TagVariant(BaseModel):
    """One accepted tag shape: how to resolve, build and render it."""

    field_schema: FieldSchema
    builder: Callable[[ParsedFields], Document]
    renderer: Callable[[Document, datetime], str]


class TagFamily(BaseModel):
    """All tags sharing one marker."""

    name: str
    marker: str
    variants: list[TagVariant]
    output_suffix: str
    enhance: bool = False  # run descriptions through the enricher

    def resolve(self, tag: RawTag) -> tuple[TagVariant, ParsedFields]:
        """Resolve with the first variant that accepts the tag.

        When no variant matches, the first variant's error is raised.
        """
        first_error = None
        for variant in self.variants:
            try:
                return variant, resolve_tag(tag, variant.field_schema)
            except TagParseError as exc:
                first_error = first_error or exc
        raise first_error

    def output_path(self, input_path: Path, suffix: str | None = None) -> Path:
        return Path(f"{input_path}{self.output_suffix if suffix is None else suffix}")


CODIZER = TagFamily(
    name="codizer",
    marker="codizer",
    variants=[
        TagVariant(field_schema=FUNCTION_SCHEMA, builder=build_function_doc, renderer=render_function_doc),
    ],
    output_suffix="_documentation.md",
    enhance=True,
)

PROMIZER = TagFamily(
    name="promizer",
    marker="promizer",
    variants=[
        TagVariant(field_schema=ENDPOINT_SCHEMA, builder=build_endpoint_doc, renderer=render_endpoint_doc),
        TagVariant(field_schema=ENDPOINT_SUMMARY_SCHEMA, builder=build_endpoint_doc, renderer=render_endpoint_summary),
    ],
    output_suffix="_api_documentation.md",
)

FAMILIES = {family.name: family for family in (CODIZER, PROMIZER)}


def get_family(name: str) -> TagFamily:
    try:
        return FAMILIES[name]
    except KeyError:
        raise ValueError(f"Unknown tag family: {name} (expected one of {', '.join(sorted(FAMILIES))})") from None
