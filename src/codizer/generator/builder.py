"""Maps resolved tag fields onto document records."""

from codizer.parser.base import EndpointDoc, FunctionDoc, Parameter, ParsedFields, Response


def build_function_doc(fields: ParsedFields) -> FunctionDoc:
    return FunctionDoc(
        title=fields["title"],
        description=fields["description"],
        developed_by=fields["developed_by"],
    )


def build_endpoint_doc(fields: ParsedFields) -> EndpointDoc:
    """Build an endpoint record from either the full or the summary tag form."""
    return EndpointDoc(
        path=fields.get("path", ""),
        base_url=fields.get("url", ""),
        method=fields.get("type", ""),
        format=fields.get("format", ""),
        description=fields.get("description", ""),
        parameters=[_build_parameter(row) for row in fields.get("parameters", [])],
        responses=[_build_response(row) for row in fields.get("responses", [])],
        tags=fields.get("tags", []),
        security=fields.get("security", []),
        consumes=fields.get("consumes", []),
        produces=fields.get("produces", []),
        deprecated=fields.get("deprecated", False),
        body=fields.get("body", ""),
    )


def _build_parameter(row: ParsedFields) -> Parameter:
    return Parameter(
        name=row["name"],
        location=row.get("location", ""),
        type_=row.get("type", ""),
        description=row.get("description", ""),
        required=row.get("required", False),
    )


def _build_response(row: ParsedFields) -> Response:
    return Response(
        code=row["code"],
        description=row.get("description", ""),
        schema_=row.get("schema", ""),
    )
