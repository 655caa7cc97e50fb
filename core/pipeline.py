"""
core/pipeline.py
────────────────────────────────────────────────────────────────────────
Per-transcript orchestration:

    transform  →  sanitize  →  parse  →  append (one batch)

Every job ends in exactly one of   skipped / appended / failed.
Anything raised by the transform or parse stages is logged and turned
into a `failed` outcome so one bad transcript never takes the process
down. `SinkError` is the only error that reaches the caller.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Protocol

from core import parser, sanitizer
from core.models.entry import Cell, FoodLogEntry
from core.models.job import JobOutcome, JobState, TranscriptJob
from core.transformer import TranscriptTransformer

_LOG = logging.getLogger(__name__)


class RowSink(Protocol):
    async def append(self, rows: List[List[Cell]]) -> None:
        ...


class LogPipeline:
    def __init__(
        self,
        transformer: TranscriptTransformer,
        sink: RowSink,
        sanitize: Callable[[str], str] = sanitizer.sanitize,
        parse: Callable[[str], List[FoodLogEntry]] = parser.parse,
    ) -> None:
        self._transformer = transformer
        self._sink = sink
        self._sanitize = sanitize
        self._parse = parse

    async def process(self, transcript: str | None) -> int:
        """Run one transcript through the pipeline; return rows appended."""
        outcome = await self.run(TranscriptJob(transcript))
        return outcome.appended

    async def run(self, job: TranscriptJob) -> JobOutcome:
        if not job.transcript or not job.transcript.strip():
            _LOG.debug("No transcript on event, nothing to do")
            return JobOutcome.skipped()

        _LOG.info("Voicenote received at %s: %s", job.received_at.isoformat(), job.excerpt)

        # ─── transform ─────────────────────────────────────────────
        try:
            raw = await self._transformer.transform(job.transcript)
        except Exception as exc:
            _LOG.error(
                "Transform failed for transcript %r: %s", job.excerpt, exc, exc_info=True
            )
            return JobOutcome.failed("transform", str(exc))
        _LOG.debug("job %s", JobState.transformed.value)

        # ─── sanitize + parse ──────────────────────────────────────
        try:
            entries = self._parse(self._sanitize(raw))
        except Exception as exc:
            _LOG.error(
                "%s for transcript %r: %s\nRaw response: %s",
                type(exc).__name__, job.excerpt, exc, raw,
            )
            return JobOutcome.failed("parse", str(exc))
        _LOG.debug("job %s", JobState.parsed.value)

        complete = [e for e in entries if e.is_complete]
        if len(complete) < len(entries):
            _LOG.warning(
                "Dropping %d entries without Date/Time", len(entries) - len(complete)
            )
        if not complete:
            _LOG.info("No valid entries to append")
            return JobOutcome.skipped()

        # ─── append ────────────────────────────────────────────────
        _LOG.info("Appending %d entries", len(complete))
        await self._sink.append([e.to_row() for e in complete])
        return JobOutcome(JobState.appended, appended=len(complete))
