import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import settings
from api.v1.router import api_router
from core.pipeline import LogPipeline
from core.transformer import TranscriptTransformer
from services.gemini import GeminiLanguageModel
from services.sheets import GoogleSheetsSink

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def build_pipeline(cfg=settings) -> LogPipeline:
    """Wire the real capabilities; raises ConfigurationError on missing creds."""
    llm = GeminiLanguageModel(
        cfg.gemini_api_key,
        model=cfg.gemini_model,
        temperature=cfg.gemini_temperature,
    )
    sink = GoogleSheetsSink.from_service_account(
        cfg.google_service_account_email,
        cfg.google_private_key,
        cfg.google_spreadsheet_id,
        range_=cfg.sheet_range,
    )
    return LogPipeline(TranscriptTransformer(llm), sink)


def create_app(pipeline: LogPipeline | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.pipeline = pipeline or build_pipeline()
        yield

    app = FastAPI(title="Food Logger Webhook", version="1.0.0", lifespan=lifespan)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health", tags=["meta"])
    def health() -> dict[str, str]:
        return {"status": "ok", "env": settings.env_name}

    return app


app = create_app()
