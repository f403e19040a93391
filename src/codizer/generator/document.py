"""Documentation generator: locate, resolve, enrich and render every tag."""

import logging
from datetime import datetime

from pydantic import BaseModel

from codizer.families import Document, TagFamily
from codizer.generator.enrich import Enricher, identity
from codizer.parser.base import Diagnostic, RawTag, TagParseError
from codizer.parser.locator import locate_tags

logger = logging.getLogger(__name__)


class DocumentResult(BaseModel):
    """Rendered Markdown plus everything that went wrong along the way."""

    markdown: str
    rendered: int  # number of tags that produced a block
    diagnostics: list[Diagnostic] = []


class DocumentGenerator:
    """Generates a Markdown document from the tags of one family.

    Tags are processed in order of appearance. A tag that fails to resolve
    contributes no block and a `schema_mismatch` diagnostic; an enrichment
    failure keeps the original description and adds an
    `enrichment_failure` diagnostic. Neither stops the run.
    """

    def __init__(self, family: TagFamily, enricher: Enricher | None = None):
        self.family = family
        self.enricher = enricher or identity

    def generate(self, text: str, updated_at: datetime) -> DocumentResult:
        blocks: list[str] = []
        diagnostics: list[Diagnostic] = []

        for tag in locate_tags(text, self.family.marker):
            try:
                variant, fields = self.family.resolve(tag)
            except TagParseError as exc:
                logger.warning("Tag parsing error at offset %d: %s", tag.start_offset, exc)
                diagnostics.append(
                    Diagnostic(
                        kind="schema_mismatch",
                        marker=tag.name,
                        message=str(exc),
                        body=exc.body,
                        offset=tag.start_offset,
                    )
                )
                continue

            doc = variant.builder(fields)
            if self.family.enhance:
                doc = self._enrich(doc, tag, diagnostics)
            blocks.append(variant.renderer(doc, updated_at))

        return DocumentResult(markdown="".join(blocks), rendered=len(blocks), diagnostics=diagnostics)

    def _enrich(self, doc: Document, tag: RawTag, diagnostics: list[Diagnostic]) -> Document:
        try:
            description = self.enricher(doc.description)
        except Exception as exc:
            logger.warning("Enrichment failed at offset %d, keeping original description: %s", tag.start_offset, exc)
            diagnostics.append(
                Diagnostic(
                    kind="enrichment_failure",
                    marker=tag.name,
                    message=str(exc) or type(exc).__name__,
                    body=doc.description,
                    offset=tag.start_offset,
                )
            )
            return doc
        return doc.model_copy(update={"description": description})
