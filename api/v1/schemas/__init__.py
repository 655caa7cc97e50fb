"""Re-export individual schema modules for easy imports."""

from .webhook import RECORDING_CREATED, VoicenoteData, VoicenotePayload, WebhookAck

__all__ = [
    "RECORDING_CREATED",
    "VoicenoteData",
    "VoicenotePayload",
    "WebhookAck",
]
