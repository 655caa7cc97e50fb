from __future__ import annotations

import json
import math
from typing import Any, List, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# column order of the "Log" sheet
SHEET_COLUMNS = [
    "Date",
    "Time",
    "Food",
    "KeyIngredients",
    "Drinks",
    "BowelCount",
    "BristolForm",
    "BowelUrgency",
    "Pain",
    "Stress",
    "Sleep",
    "Comments",
]

# numbers are passed through as the model wrote them (no range checks)
Score = Union[int, float, str, None]
Cell = Union[str, int, float]


def _alias(column: str, camel: str, snake: str) -> Any:
    choices = dict.fromkeys([column, camel, snake])
    return Field(
        None,
        validation_alias=AliasChoices(*choices),
        serialization_alias=column,
    )


class FoodLogEntry(BaseModel):
    """One row of the food log, as produced by the model."""

    date: str | None = _alias("Date", "date", "date")
    time: str | None = _alias("Time", "time", "time")
    food: str | None = _alias("Food", "food", "food")
    key_ingredients: str | None = _alias("KeyIngredients", "keyIngredients", "key_ingredients")
    drinks: str | None = _alias("Drinks", "drinks", "drinks")
    bowel_count: Score = _alias("BowelCount", "bowelCount", "bowel_count")
    bristol_form: Score = _alias("BristolForm", "bristolForm", "bristol_form")
    bowel_urgency: Score = _alias("BowelUrgency", "bowelUrgency", "bowel_urgency")
    pain: str | None = _alias("Pain", "pain", "pain")
    stress: str | None = _alias("Stress", "stress", "stress")
    sleep: str | None = _alias("Sleep", "sleep", "sleep")
    comments: str | None = _alias("Comments", "comments", "comments")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # ─── coercion ───────────────────────────────────────────────────
    @field_validator(
        "date", "time", "food", "key_ingredients", "drinks",
        "pain", "stress", "sleep", "comments",
        mode="before",
    )
    @classmethod
    def _as_text(cls, v: Any) -> str | None:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, list):
            # the model sometimes answers bullet lists as JSON arrays
            return "\n".join(str(item) for item in v)
        if isinstance(v, dict):
            return json.dumps(v, ensure_ascii=False)
        return str(v)

    @field_validator("bowel_count", "bristol_form", "bowel_urgency", mode="before")
    @classmethod
    def _as_score(cls, v: Any) -> Any:
        if isinstance(v, (list, dict)):
            return json.dumps(v, ensure_ascii=False)
        # NaN / Infinity are not valid JSON for the Sheets API
        if isinstance(v, float) and not math.isfinite(v):
            return None
        return v

    # ─── helpers ────────────────────────────────────────────────────
    @property
    def is_complete(self) -> bool:
        return bool((self.date or "").strip() and (self.time or "").strip())

    def to_row(self) -> List[Cell]:
        """12-column projection used by the sheet append; None becomes ""."""
        values = [
            self.date,
            self.time,
            self.food,
            self.key_ingredients,
            self.drinks,
            self.bowel_count,
            self.bristol_form,
            self.bowel_urgency,
            self.pain,
            self.stress,
            self.sleep,
            self.comments,
        ]
        return ["" if v is None else v for v in values]
