# services/gemini.py
import logging

from google import genai
from google.genai import types

from core.errors import ConfigurationError, UpstreamError

_LOG = logging.getLogger(__name__)

# ───────────── Model Names ─────────────
CHAT_MODEL = "gemini-2.0-flash"


class GeminiLanguageModel:
    """`LanguageModel` backed by the google-genai async client."""

    def __init__(
        self,
        api_key: str | None,
        model: str = CHAT_MODEL,
        temperature: float = 0.2,
        client: genai.Client | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY not set in environment")
        self._client = client or genai.Client(api_key=api_key)
        self._model = model
        self._temperature = temperature

    # ───────────── Generation (async) ─────────────
    async def generate(self, instructions: str, input_text: str) -> str | None:
        """Run one completion and return the model's text (may be None)."""
        try:
            resp = await self._client.aio.models.generate_content(
                model=self._model,
                contents=[input_text],
                config=types.GenerateContentConfig(
                    system_instruction=instructions,
                    temperature=self._temperature,
                ),
            )
        except Exception as e:
            _LOG.error("Gemini generation failed: %s", e)
            raise UpstreamError("Failed to transform transcript with AI") from e
        return resp.text
