from __future__ import annotations

from typing import Any

import httpx
import pytest

from config.settings import Settings
from etl.run_etl import reset_logging


class FakeSpreadsheet:
    """In-memory stand-in for gspread.Spreadsheet values_* calls."""

    def __init__(self, key: str, calls: list):
        self.key = key
        self.calls = calls
        self.cleared: list[str] = []
        self.values: dict[str, list] = {}

    def values_clear(self, range: str) -> dict:
        self.calls.append(("clear", self.key, range))
        self.cleared.append(range)
        self.values.clear()
        return {}

    def values_update(self, range: str, params: dict | None = None, body: dict | None = None) -> dict:
        self.calls.append(("update", self.key, range, params, body))
        self.values[range] = [list(row) for row in body["values"]]
        return {"updatedRows": len(body["values"])}


class FakeSheetsClient:
    def __init__(self):
        self.calls: list = []
        self.spreadsheets: dict[str, FakeSpreadsheet] = {}

    def open_by_key(self, key: str) -> FakeSpreadsheet:
        if key not in self.spreadsheets:
            self.spreadsheets[key] = FakeSpreadsheet(key, self.calls)
        return self.spreadsheets[key]


@pytest.fixture(autouse=True)
def _clean_logging():
    yield
    reset_logging()


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        SHEET_ID="sheet-123",
        SOURCE_API_URL="https://api.example.com/shops",
        SOURCE_API_KEY="secret-key",
        WRITE_RANGE="Data!A2",
        CLEAR_RANGE="Data!A12:Z2000",
    )


@pytest.fixture()
def sheets_client() -> FakeSheetsClient:
    return FakeSheetsClient()


@pytest.fixture()
def make_http_client():
    """Build an httpx.Client answering every request with the given response."""
    requests: list[httpx.Request] = []

    def _make(status_code: int = 200, json: Any = None, content: bytes | None = None) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        client.requests = requests
        return client

    return _make


@pytest.fixture()
def env_workdir(tmp_path, monkeypatch):
    """Empty working directory with the job's variables unset."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "SHEET_ID",
        "SOURCE_API_URL",
        "SOURCE_API_KEY",
        "WRITE_RANGE",
        "CLEAR_RANGE",
        "GOOGLE_CREDENTIALS_PATH",
        "LOG_LEVEL",
        "LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
