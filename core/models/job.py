from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class JobState(str, Enum):
    received = "received"
    transformed = "transformed"
    parsed = "parsed"
    skipped = "skipped"
    appended = "appended"
    failed = "failed"


@dataclass(frozen=True)
class TranscriptJob:
    """One webhook event's worth of work. Lives only for the request."""

    transcript: str | None
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def excerpt(self) -> str:
        text = (self.transcript or "").strip()
        return text if len(text) <= 200 else text[:200] + "…"


@dataclass(frozen=True)
class JobOutcome:
    state: JobState
    appended: int = 0
    stage: str | None = None
    reason: str | None = None

    @classmethod
    def skipped(cls) -> "JobOutcome":
        return cls(JobState.skipped)

    @classmethod
    def failed(cls, stage: str, reason: str) -> "JobOutcome":
        return cls(JobState.failed, stage=stage, reason=reason)
