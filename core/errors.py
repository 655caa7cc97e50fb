"""
Error taxonomy for the food-log pipeline.

Only `SinkError` is allowed to escape `LogPipeline.process`; everything
raised while transforming or parsing is logged and turned into a
failed job outcome.
"""
from __future__ import annotations


class FoodLogError(Exception):
    """Base class for every error raised by this service."""


class ConfigurationError(FoodLogError):
    """A credential or identifier is missing; raised before any call is made."""


class UpstreamError(FoodLogError):
    """The language model call failed."""


class MalformedResponseError(FoodLogError):
    """The model output could not be parsed as JSON."""

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw


class SinkError(FoodLogError):
    """Appending rows to the spreadsheet failed."""
