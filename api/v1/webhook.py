# api/v1/webhook.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from core.errors import SinkError
from core.models.job import TranscriptJob
from core.pipeline import LogPipeline
from api.v1.schemas import RECORDING_CREATED, VoicenotePayload, WebhookAck

router = APIRouter()
_LOG = logging.getLogger(__name__)


def get_pipeline(request: Request) -> LogPipeline:
    """The pipeline built once by the app lifespan."""
    return request.app.state.pipeline


@router.post(
    "",
    response_model=WebhookAck,
    status_code=status.HTTP_200_OK,
    summary="Receive a voicenote event and log any meals it describes",
)
async def receive_voicenote(
    body: VoicenotePayload,
    pipeline: LogPipeline = Depends(get_pipeline),
) -> WebhookAck:
    if body.event != RECORDING_CREATED:
        _LOG.debug("Ignoring %s event", body.event)
        return WebhookAck(status="ignored")

    _LOG.info("Note created: id=%s title=%r", body.data.id, body.data.title)
    job = (
        TranscriptJob(body.data.transcript, body.timestamp)
        if body.timestamp
        else TranscriptJob(body.data.transcript)
    )
    try:
        outcome = await pipeline.run(job)
    except SinkError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc

    return WebhookAck(status="ok", appended=outcome.appended)
