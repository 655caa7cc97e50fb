import pytest

from core.pipeline import LogPipeline
from core.transformer import TranscriptTransformer
from tests.fakes import FIXED_DAY, FakeModel, FakeSink


@pytest.fixture
def model() -> FakeModel:
    return FakeModel()


@pytest.fixture
def sink() -> FakeSink:
    return FakeSink()


@pytest.fixture
def pipeline(model: FakeModel, sink: FakeSink) -> LogPipeline:
    return LogPipeline(TranscriptTransformer(model, today=lambda: FIXED_DAY), sink)
