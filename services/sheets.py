"""
services/sheets.py
────────────────────────────────────────────────────────────────────────
* Service-account auth via google-auth
* Async `values:append` against the Sheets v4 REST API (httpx)

Append is insert-only (`INSERT_ROWS`) and all-or-nothing from our side:
any transport error or non-2xx answer is a `SinkError`.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, List
from urllib.parse import quote

import httpx
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from core.errors import ConfigurationError, SinkError
from core.models.entry import Cell

_LOG = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"
SHEETS_API = "https://sheets.googleapis.com/v4/spreadsheets"
DEFAULT_RANGE = "Log!A:L"


# ───────── credentials ──────────────────────────────────────────────
def load_credentials(email: str | None, private_key: str | None) -> Any:
    if not email or not private_key:
        raise ConfigurationError(
            "GOOGLE_SERVICE_ACCOUNT_EMAIL and GOOGLE_PRIVATE_KEY must both be set"
        )
    info = {
        "client_email": email,
        # keys pasted into env vars usually carry literal "\n"
        "private_key": private_key.replace("\\n", "\n"),
        "token_uri": TOKEN_URI,
    }
    try:
        return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
    except ValueError as exc:
        raise ConfigurationError(f"invalid service account key: {exc}") from exc


# ───────── sink ─────────────────────────────────────────────────────
class GoogleSheetsSink:
    """`RowSink` that appends rows to one range of one spreadsheet."""

    def __init__(
        self,
        spreadsheet_id: str | None,
        credentials: Any,
        range_: str = DEFAULT_RANGE,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        if not spreadsheet_id:
            raise ConfigurationError("GOOGLE_SPREADSHEET_ID not set in environment")
        if credentials is None:
            raise ConfigurationError("Google credentials missing")
        self._spreadsheet_id = spreadsheet_id
        self._credentials = credentials
        self._range = range_
        self._http = http

    @classmethod
    def from_service_account(
        cls,
        email: str | None,
        private_key: str | None,
        spreadsheet_id: str | None,
        range_: str = DEFAULT_RANGE,
    ) -> "GoogleSheetsSink":
        if not spreadsheet_id:
            raise ConfigurationError("GOOGLE_SPREADSHEET_ID not set in environment")
        return cls(spreadsheet_id, load_credentials(email, private_key), range_)

    @property
    def url(self) -> str:
        return f"{SHEETS_API}/{self._spreadsheet_id}/values/{quote(self._range, safe='')}:append"

    async def _token(self) -> str:
        if not self._credentials.valid:
            # google-auth refresh is blocking
            await asyncio.to_thread(self._credentials.refresh, Request())
        return self._credentials.token

    async def append(self, rows: List[List[Cell]]) -> None:
        try:
            token = await self._token()
            if self._http is not None:
                resp = await self._post(self._http, token, rows)
            else:
                async with httpx.AsyncClient(timeout=30.0) as http:
                    resp = await self._post(http, token, rows)
            resp.raise_for_status()
        except Exception as exc:
            _LOG.error("Error appending to Google Sheets: %s", exc)
            raise SinkError("Failed to append entries to Google Sheets") from exc

        _LOG.info("Successfully appended %d entries to Google Sheets", len(rows))
        _LOG.debug("Google Sheets response: %s", resp.text)

    async def _post(self, http: httpx.AsyncClient, token: str, rows: List[List[Cell]]) -> httpx.Response:
        return await http.post(
            self.url,
            params={
                "valueInputOption": "USER_ENTERED",
                "insertDataOption": "INSERT_ROWS",
            },
            headers={"Authorization": f"Bearer {token}"},
            json={"values": rows},
        )
