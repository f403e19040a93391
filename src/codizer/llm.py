"""LLM client wrapper around litellm.

Provides a unified interface for calling any text-generation model
supported by litellm.
"""

from litellm import completion

DEFAULT_MODEL = "gemini/gemini-1.5-flash"
DEFAULT_TIMEOUT = 30.0


class LlmClient:
    """Wrapper for LLM API calls via litellm."""

    def __init__(self, model: str | None = None, api_key: str | None = None, timeout: float = DEFAULT_TIMEOUT):
        self.model = model or DEFAULT_MODEL
        self.api_key = api_key
        self.timeout = timeout

    def call(self, system: str, user: str) -> str:
        """Send a system+user message to the LLM and return the response text."""
        response = completion(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            api_key=self.api_key,
            timeout=self.timeout,
        )
        return response.choices[0].message.content
