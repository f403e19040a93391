"""Optional description enrichment, a text-in/text-out hook.

An enricher is any callable taking a description and returning the text to
render. Failures are handled by the caller, which falls back to the
original description.
"""

import logging
from pathlib import Path
from typing import Callable

from codizer.config import Settings
from codizer.llm import LlmClient

PROMPTS_DIR = Path(__file__).parent.parent / "prompts"

logger = logging.getLogger(__name__)

Enricher = Callable[[str], str]


class EnrichmentError(RuntimeError):
    """The enrichment service returned nothing usable."""


def identity(text: str) -> str:
    return text


class LlmEnricher:
    """Improves descriptions through an LLM."""

    def __init__(self, client: LlmClient):
        self.client = client

    def __call__(self, description: str) -> str:
        prompt = (PROMPTS_DIR / "enrich.md").read_text(encoding="utf-8")
        response = self.client.call(system=prompt, user=description)
        if not response or not response.strip():
            raise EnrichmentError("empty response from enrichment service")
        return response.strip()


def build_enricher(settings: Settings) -> Enricher:
    """Return an LLM enricher, or `identity` when no API key is configured."""
    if not settings.api_key:
        logger.info("No API key configured, description enrichment disabled")
        return identity
    client = LlmClient(model=settings.model, api_key=settings.api_key, timeout=settings.timeout)
    return LlmEnricher(client)
