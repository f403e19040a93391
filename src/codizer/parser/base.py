"""Data models for located tags, field schemas and parsed documents.

The locator, resolver and builder exchange these models; the renderers
only ever see FunctionDoc and EndpointDoc.
"""

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TagParseError(ValueError):
    """A located tag whose body does not satisfy its schema."""

    def __init__(self, message: str, body: str):
        super().__init__(message)
        self.body = body


class RawTag(BaseModel):
    """One located `//marker(body)` occurrence."""

    model_config = ConfigDict(frozen=True)

    name: str  # marker, e.g. codizer / promizer
    body: str  # raw text between the outer parentheses
    start_offset: int
    end_offset: int


class FieldKind(str, Enum):
    SCALAR = "scalar"  # key='value'
    STRING_ARRAY = "string_array"  # key=[a, 'b']
    OBJECT_ARRAY = "object_array"  # key=[{...}, {...}]
    BOOL = "bool"  # key='true'
    RAW = "raw"  # key=[...] kept as quote-stripped text


class FieldSpec(BaseModel):
    """A single field of a tag schema."""

    model_config = ConfigDict(frozen=True)

    key: str
    kind: FieldKind = FieldKind.SCALAR
    required: bool = True
    sub_schema: "FieldSchema | None" = None  # only for OBJECT_ARRAY

    @field_validator("key")
    @classmethod
    def key_is_identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"field key must be an identifier: {value!r}")
        return value

    @model_validator(mode="after")
    def object_array_has_sub_schema(self) -> "FieldSpec":
        if (self.kind is FieldKind.OBJECT_ARRAY) != (self.sub_schema is not None):
            raise ValueError("sub_schema is required for object_array fields and only for them")
        return self


class FieldSchema(BaseModel):
    """Ordered field declaration for one tag shape.

    Fields must appear in the tag body in the declared order. The first
    field is always required so that every later field can be introduced
    by a comma separator.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[FieldSpec, ...]

    @model_validator(mode="after")
    def first_field_required(self) -> "FieldSchema":
        if not self.fields:
            raise ValueError("a schema needs at least one field")
        if not self.fields[0].required:
            raise ValueError(f"first field of schema {self.name!r} must be required")
        keys = [spec.key for spec in self.fields]
        if len(keys) != len(set(keys)):
            raise ValueError(f"duplicate field keys in schema {self.name!r}")
        return self


FieldSpec.model_rebuild()

FieldValue = Union[str, bool, list[str], list[dict]]
ParsedFields = dict[str, FieldValue]


class FunctionDoc(BaseModel):
    """Documentation record for a `//codizer(...)` function tag."""

    title: str
    description: str
    developed_by: str


class Parameter(BaseModel):
    """A single endpoint parameter."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = ""  # query / path / header / body
    type_: str = Field(default="", alias="type")
    description: str = ""
    required: bool = False


class Response(BaseModel):
    """A single documented endpoint response."""

    model_config = ConfigDict(populate_by_name=True)

    code: str
    description: str = ""
    schema_: str = Field(default="", alias="schema")


class EndpointDoc(BaseModel):
    """Documentation record for a `//promizer(...)` endpoint tag."""

    path: str = ""
    base_url: str = ""
    method: str = ""  # GET / POST / PUT / DELETE / PATCH
    format: str = ""  # JSON / raw-json / ...
    description: str = ""
    parameters: list[Parameter] = []
    responses: list[Response] = []
    tags: list[str] = []
    security: list[str] = []
    consumes: list[str] = []
    produces: list[str] = []
    deprecated: bool = False
    body: str = ""  # quote-stripped literal, not validated as JSON


class Diagnostic(BaseModel):
    """A non-fatal problem reported while generating documentation."""

    kind: Literal["schema_mismatch", "enrichment_failure"]
    marker: str
    message: str
    body: str = ""
    offset: int = 0
