# api/v1/router.py
from fastapi import APIRouter

from . import webhook

api_router = APIRouter()

api_router.include_router(webhook.router, prefix="/webhook", tags=["Webhook"])
