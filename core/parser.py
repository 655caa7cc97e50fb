"""
core/parser.py
────────────────────────────────────────────────────────────────────────
Turn sanitized model output into `FoodLogEntry` objects.

The decoded JSON is first classified into one of three shapes:

  • Sequence      → a JSON array; one entry per element, same order
                    (non-objects become blank entries)
  • SingleObject  → one object carrying a date; wrapped as one entry
  • Other         → `{}`, `null`, scalars, objects without a date → nothing

Only an outright decode failure raises (`MalformedResponseError`).
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from core.errors import MalformedResponseError
from core.models.entry import FoodLogEntry

_LOG = logging.getLogger(__name__)

_DATE_KEYS = ("Date", "date")


# ─────────────────────────────── shapes ───────────────────────────── #
@dataclass(frozen=True)
class Sequence:
    items: List[Any]


@dataclass(frozen=True)
class SingleObject:
    fields: Dict[str, Any]


@dataclass(frozen=True)
class Other:
    value: Any


Shape = Union[Sequence, SingleObject, Other]


def classify(value: Any) -> Shape:
    if isinstance(value, list):
        return Sequence(value)
    if isinstance(value, dict) and any(value.get(k) for k in _DATE_KEYS):
        return SingleObject(value)
    return Other(value)


# ─────────────────────────────── parse ────────────────────────────── #
def parse(sanitized: str) -> List[FoodLogEntry]:
    try:
        value = json.loads(sanitized)
    except (json.JSONDecodeError, TypeError) as exc:
        raise MalformedResponseError(f"model output is not valid JSON: {exc}", raw=sanitized) from exc

    shape = classify(value)
    if isinstance(shape, Sequence):
        entries = [_to_entry(item, i) for i, item in enumerate(shape.items)]
        _LOG.info("Found %d food log entries", len(entries))
        return entries
    if isinstance(shape, SingleObject):
        _LOG.info("Found 1 food log entry")
        return [_to_entry(shape.fields, 0)]

    _LOG.info("Empty or unrecognised response shape: %r", shape.value)
    return []


def _to_entry(item: Any, index: int) -> FoodLogEntry:
    # unusable elements keep their slot as a blank entry; the pipeline
    # drops it because it has no Date/Time
    if not isinstance(item, dict):
        _LOG.warning("Blank entry %d: expected an object, got %s", index + 1, type(item).__name__)
        return FoodLogEntry()
    try:
        entry = FoodLogEntry.model_validate(item)
    except ValidationError as exc:
        _LOG.warning("Blank entry %d: %s", index + 1, exc)
        return FoodLogEntry()
    _LOG.debug("Entry %d: %s", index + 1, entry.model_dump(by_alias=True))
    return entry
