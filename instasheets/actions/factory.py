"""Factory helpers wiring stores -> token provider -> client -> catalog -> runner.

Purpose
-------
- Provide a single composition point so hosts (CLI, tests) do not repeat
  boot logic (env parsing, store choice, client construction).
- Swap the token store via `kind='memory'` or `kind='redis'` without
  touching callers.
"""

from __future__ import annotations

from typing import Any, Optional

from instasheets.actions.catalog import EndpointCatalog
from instasheets.actions.runner import ActionRunner
from instasheets.config import api_config
from instasheets.tools.auth.interface import PropertyStore
from instasheets.tools.auth.oauth2 import OAuth2Service
from instasheets.tools.http.client import HttpJsonClient
from instasheets.tools.http.paginator import Paginator
from instasheets.tools.sheet.adapters.in_memory_sheet import InMemorySheet
from instasheets.tools.sheet.interface import TableSink
from instasheets.tools.ui.adapters.console_ui import ConsoleUI
from instasheets.tools.ui.interface import UserInterface


def build_store(kind: str = "memory") -> PropertyStore:
    if kind == "memory":
        from instasheets.tools.auth.adapters.in_memory_store import InMemoryPropertyStore

        return InMemoryPropertyStore()
    elif kind == "redis":
        from instasheets.tools.auth.adapters.redis_store import RedisPropertyStore

        return RedisPropertyStore()
    else:
        raise ValueError(f"Unknown property store kind '{kind}'")


def create_auth_service(kind: str = "memory", store: Optional[PropertyStore] = None, session: Optional[Any] = None) -> OAuth2Service:
    return OAuth2Service.from_settings(store or build_store(kind), session=session)


def create_runner(
    kind: str = "memory",
    ui: Optional[UserInterface] = None,
    sink: Optional[TableSink] = None,
    store: Optional[PropertyStore] = None,
    session: Optional[Any] = None,
    base_url: str = api_config.API_BASE_URL,
) -> ActionRunner:
    auth = create_auth_service(kind, store=store, session=session)
    client = HttpJsonClient(session=session)
    catalog = EndpointCatalog(Paginator(client), auth, base_url=base_url)
    return ActionRunner(catalog, ui or ConsoleUI(), sink or InMemorySheet(), auth=auth)


__all__ = ["build_store", "create_auth_service", "create_runner"]
