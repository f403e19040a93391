from unittest.mock import patch, MagicMock

import pytest

from codizer.config import Settings
from codizer.generator.enrich import EnrichmentError, LlmEnricher, build_enricher, identity


class TestIdentity:
    def test_passthrough(self):
        assert identity("Adds two numbers") == "Adds two numbers"


class TestLlmEnricher:
    def test_returns_stripped_response(self):
        client = MagicMock()
        client.call.return_value = "  Adds two integers and returns their sum.\n"
        enricher = LlmEnricher(client)
        assert enricher("Adds two numbers") == "Adds two integers and returns their sum."

    def test_sends_description_with_prompt(self):
        client = MagicMock()
        client.call.return_value = "better"
        LlmEnricher(client)("Adds two numbers")
        call_kwargs = client.call.call_args[1]
        assert call_kwargs["user"] == "Adds two numbers"
        assert "description" in call_kwargs["system"].lower()

    @pytest.mark.parametrize("response", ["", "   ", None])
    def test_empty_response_raises(self, response):
        client = MagicMock()
        client.call.return_value = response
        with pytest.raises(EnrichmentError):
            LlmEnricher(client)("text")


class TestBuildEnricher:
    def test_no_api_key_disables_enrichment(self):
        assert build_enricher(Settings()) is identity

    @patch("codizer.generator.enrich.LlmClient")
    def test_api_key_builds_llm_enricher(self, MockLlmClient):
        enricher = build_enricher(Settings(api_key="secret", model="gpt-4o", timeout=5))
        assert isinstance(enricher, LlmEnricher)
        MockLlmClient.assert_called_once_with(model="gpt-4o", api_key="secret", timeout=5)
