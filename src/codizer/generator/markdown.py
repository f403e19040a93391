"""Markdown renderers for function and endpoint documents.

Every renderer is a pure function of the document and the caller's
timestamp, and every rendered block ends with SEPARATOR.
"""

from datetime import datetime

from codizer.parser.base import EndpointDoc, FunctionDoc, Parameter, Response

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
SEPARATOR = "---\n\n"
DEPRECATION_BANNER = "> **Deprecated**: this endpoint may be removed in a future version."


def render_function_doc(doc: FunctionDoc, updated_at: datetime) -> str:
    sections = [
        f"# {doc.title}\n",
        f"## Description\n{doc.description}\n",
        f"## Developed by\n{doc.developed_by}\n",
    ]
    return _finish(sections, updated_at)


def render_endpoint_doc(doc: EndpointDoc, updated_at: datetime) -> str:
    sections = [f"# {doc.base_url}{doc.path}\n"]
    if doc.deprecated:
        sections.append(f"{DEPRECATION_BANNER}\n")
    sections.append(f"- **Method**: {doc.method}\n- **Format**: {doc.format}\n")
    sections.append(f"## Description\n{doc.description}\n")

    if doc.parameters:
        sections.append("## Parameters\n\n" + "\n".join(_render_parameter(p) for p in doc.parameters))
    if doc.responses:
        sections.append("## Responses\n\n" + "\n".join(_render_response(r) for r in doc.responses))
    for title, items in (
        ("Tags", doc.tags),
        ("Security", doc.security),
        ("Consumes", doc.consumes),
        ("Produces", doc.produces),
    ):
        if items:
            sections.append(_render_list(title, items))
    if doc.body.strip():
        sections.append(f"## Request Body\n```json\n{doc.body.strip()}\n```\n")

    return _finish(sections, updated_at)


def render_endpoint_summary(doc: EndpointDoc, updated_at: datetime) -> str:
    """Render the short `type`/`format`/`body` endpoint form."""
    sections = [
        "# Endpoint Documentation\n",
        f"- **Method**: {doc.method}\n- **Format**: {doc.format}\n",
    ]
    if doc.body.strip():
        sections.append(f"**Request Body**:\n{doc.body.strip()}\n")
    return _finish(sections, updated_at)


def _render_parameter(param: Parameter) -> str:
    lines = [
        f"### {param.name}",
        f"- **Location**: {param.location}",
        f"- **Type**: {param.type_}",
        f"- **Required**: {'Yes' if param.required else 'No'}",
    ]
    if param.description:
        lines.append(f"- **Description**: {param.description}")
    return "\n".join(lines) + "\n"


def _render_response(response: Response) -> str:
    lines = [f"### {response.code}"]
    if response.description:
        lines.append(response.description)
    if response.schema_:
        lines.append(f"- **Schema**: `{response.schema_}`")
    return "\n".join(lines) + "\n"


def _render_list(title: str, items: list[str]) -> str:
    return f"## {title}\n" + "".join(f"- {item}\n" for item in items)


def _finish(sections: list[str], updated_at: datetime) -> str:
    sections.append(f"*Last updated: {updated_at.strftime(TIMESTAMP_FORMAT)}*\n")
    sections.append(SEPARATOR)
    return "\n".join(sections)
