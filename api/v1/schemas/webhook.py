from __future__ import annotations
from datetime import datetime

from pydantic import BaseModel, ConfigDict

RECORDING_CREATED = "recording.created"


class VoicenoteData(BaseModel):
    id: str | None = None
    title: str | None = None
    transcript: str | None = None
    content: str | None = None
    type: str | None = None

    model_config = ConfigDict(extra="ignore")


class VoicenotePayload(BaseModel):
    event: str
    timestamp: datetime | None = None
    data: VoicenoteData

    model_config = ConfigDict(extra="ignore")


class WebhookAck(BaseModel):
    status: str                 # ok / ignored
    appended: int = 0
