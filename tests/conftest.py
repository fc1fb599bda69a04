import json
from typing import Any, Dict, List, Optional

import pytest  # noqa
import requests

from instasheets.actions.factory import create_runner
from instasheets.config import api_config
from instasheets.tools.auth.adapters.in_memory_store import InMemoryPropertyStore
from instasheets.tools.sheet.adapters.in_memory_sheet import InMemorySheet
from instasheets.tools.ui.adapters.scripted_ui import ScriptedUI

BASE_URL = "https://api.instagram.com/v1/"
TOKEN = "123.abc.xyz"


# --- fake transport ----------------------------------------------------------

class FakeResponse:
    def __init__(self, body: Any, status_code: int = 200):
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.status_code = status_code

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stand-in for requests.Session: canned bodies per URL, calls recorded."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None, token_body: Any = None):
        self.routes: Dict[str, Any] = dict(routes or {})
        self.token_body = token_body
        self.get_calls: List[str] = []
        self.post_calls: List[Dict[str, Any]] = []

    def get(self, url, headers=None, timeout=None):
        self.get_calls.append(url)
        if url not in self.routes:
            raise AssertionError(f"unexpected GET {url}")
        body = self.routes[url]
        if isinstance(body, Exception):
            raise body
        return body if isinstance(body, (FakeResponse, requests.Response)) else FakeResponse(body)

    def post(self, url, data=None, timeout=None):
        self.post_calls.append({"url": url, "data": data})
        body = self.token_body
        return body if isinstance(body, FakeResponse) else FakeResponse(body)


def envelope(data: Any, next_url: Optional[str] = None, code: int = 200, **meta: Any) -> Dict[str, Any]:
    env: Dict[str, Any] = {"meta": {"code": code, **meta}, "data": data}
    if next_url is not None:
        env["pagination"] = {"next_url": next_url}
    return env


def url_for(path: str, query: str = "") -> str:
    return f"{BASE_URL}{path}?{query}access_token={TOKEN}"


# --- fixtures ----------------------------------------------------------------

@pytest.fixture
def token_store():
    return InMemoryPropertyStore({api_config.TOKEN_KEY: json.dumps({"access_token": TOKEN})})


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def sheet():
    return InMemorySheet(max_rows=20, max_columns=4)


@pytest.fixture
def make_runner(session, sheet, token_store):
    def _make(answers=(), store=None):
        ui = ScriptedUI(answers)
        runner = create_runner(
            "memory",
            ui=ui,
            sink=sheet,
            store=store if store is not None else token_store,
            session=session,
            base_url=BASE_URL,
        )
        return runner, ui
    return _make
