"""
core/transformer.py
────────────────────────────────────────────────────────────────────────
Date-aware prompt construction + the language-model call.

`TranscriptTransformer.transform()` returns the model's text untouched;
cleaning and parsing happen in `core.sanitizer` / `core.parser`.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Protocol

_LOG = logging.getLogger(__name__)

DEFAULT_MEAL_TIMES = {
    "breakfast": "08:30",
    "lunch": "12:15",
    "dinner": "20:00",
}
EMPTY_RESPONSE = "{}"


class LanguageModel(Protocol):
    async def generate(self, instructions: str, input_text: str) -> str | None:
        ...


def format_day(day: date) -> str:
    """DD/MM/YYYY, zero padded."""
    return day.strftime("%d/%m/%Y")


def build_instructions(today: str) -> str:
    times = DEFAULT_MEAL_TIMES
    return (
        "You are a food logging assistant. Transform the voice transcript into "
        "structured JSON data for food logging. Return only a valid JSON array of "
        "food log entries, each entry matching the following fields:\n\n"
        "# Fields\n"
        "[\n"
        "  {\n"
        '    "Date": "DD/MM/YYYY",\n'
        '    "Time": "HH:MM",\n'
        '    "Food": "List of foods eaten, multiline with bullet points",\n'
        '    "KeyIngredients": "List of ingredients, multiline with bullet points",\n'
        '    "Drinks": "List of drinks consumed, multiline with bullet points",\n'
        '    "BowelCount": "Number of bowel movements",\n'
        '    "BristolForm": "Bristol stool form scale, range from 1 to 7",\n'
        '    "BowelUrgency": "Urgency to defecate scale, range from 1 to 5",\n'
        '    "Pain": "Any discomfort or pain experienced, can be null",\n'
        '    "Stress": "Stress level or notes, can be null",\n'
        '    "Sleep": "Sleep duration or quality, can be null",\n'
        '    "Comments": "Additional observations or context, can be null"\n'
        "  }\n"
        "]\n\n"
        "# Rules\n"
        "- Usually a voice transcript will contain entries for 3 meals: breakfast, lunch, dinner\n"
        "- Unless times are specified in the transcript, assume breakfast is at "
        f"{times['breakfast']}, lunch at {times['lunch']}, dinner at {times['dinner']}\n"
        "- Always create a separate json entry for each meal, up to 3 per day\n"
        "- If one of the meals is absent from the transcript, **do not** create an entry\n"
        "- If the voice transcript is not related to any food logging, return an empty json\n"
        f"- **Use today's date ({today}) for all entries unless a different date "
        "is explicitly mentioned in the transcript**\n"
    )


def build_input(transcript: str) -> str:
    return f'Transform this transcript into food log entries: "{transcript}"'


class TranscriptTransformer:
    def __init__(
        self,
        llm: LanguageModel,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._llm = llm
        self._today = today

    async def transform(self, transcript: str) -> str:
        # date is read per call, never cached
        instructions = build_instructions(format_day(self._today()))
        raw = await self._llm.generate(instructions, build_input(transcript))
        _LOG.debug("Raw transformed data: %s", raw)
        return raw or EMPTY_RESPONSE
