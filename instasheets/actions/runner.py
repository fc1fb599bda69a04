"""Action runner: prompts -> catalog -> paginator -> flattener -> sheet.

Responsibilities:
- collect the action's inputs; a cancelled or empty required prompt aborts
  silently (no request, no dialog)
- invoke the endpoint and resolve the whole pagination chain
- show API errors (including missing authorization) in an alert and write
  nothing
- flatten every page before writing anything, then write page by page at
  the destination cursor, skipping pages that produce no rows
- emit platform_monitoring events at start/cancel/error/success

Transport faults, pagination guard trips and over-deep JSON are not
handled here; they propagate to the host's fault reporting.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

import platform_monitoring
from instasheets.actions.catalog import EndpointCatalog
from instasheets.actions.inputs import collect_inputs
from instasheets.exceptions import ApiError
from instasheets.tools.auth.oauth2 import OAuth2Service
from instasheets.tools.sheet.interface import Cursor, TableSink
from instasheets.tools.ui.interface import UserInterface
from instasheets.utils.flatten import Row, flatten
from instasheets.utils.json_tree import JsonNode

SUCCESS = "SUCCESS"
NO_RESULTS = "NO_RESULTS"
CANCELLED = "CANCELLED"
ERROR = "ERROR"


@dataclass
class ActionResult:
    action: str
    status: str
    pages: int = 0
    rows_written: int = 0
    cursor: Optional[Cursor] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ActionRunner:
    def __init__(
        self,
        catalog: EndpointCatalog,
        ui: UserInterface,
        sink: TableSink,
        auth: Optional[OAuth2Service] = None,
    ):
        self.catalog = catalog
        self.ui = ui
        self.sink = sink
        self.auth = auth

    def run(self, action_name: str, cursor: Cursor) -> ActionResult:
        spec = self.catalog.get(action_name)
        platform_monitoring.log_event("action.start", {"action": action_name, "row": cursor.row, "column": cursor.column})

        values = collect_inputs(spec.inputs, self.ui)
        if values is None:
            platform_monitoring.log_event("action.cancelled", {"action": action_name})
            return ActionResult(action_name, CANCELLED, cursor=cursor)

        path, params = self.catalog.build_request(spec, values)
        try:
            pages = self.catalog.invoke(path, params)
        except ApiError as exc:
            platform_monitoring.log_event(
                "action.api_error",
                {"action": action_name, "code": exc.code, "kind": exc.kind, "error": exc.message},
            )
            self.ui.alert(exc.title, exc.detail)
            return ActionResult(action_name, ERROR, cursor=cursor, error=str(exc))

        written, end = self.write_pages(pages, cursor)
        status = SUCCESS if written else NO_RESULTS
        platform_monitoring.log_event(
            "action.success",
            {"action": action_name, "pages": len(pages), "rows": written, "status": status},
        )
        platform_monitoring.prometheus_metric("instasheets_rows_written", written, {"action": action_name})
        return ActionResult(action_name, status, pages=len(pages), rows_written=written, cursor=end)

    def write_pages(self, pages: List[JsonNode], cursor: Cursor) -> Tuple[int, Cursor]:
        """Flatten all pages, then write each non-empty one below the previous."""
        flattened: List[List[Row]] = [flatten(page) for page in pages]
        written = 0
        for rows in flattened:
            if not rows:
                continue
            cursor = self.sink.write_rows(rows, cursor)
            written += len(rows)
        return written, cursor

    # -------- authorization actions --------
    def _require_auth(self) -> OAuth2Service:
        if self.auth is None:
            raise RuntimeError("OAuth2 service not configured for this runner")
        return self.auth

    def authorize(self) -> None:
        auth = self._require_auth()
        if auth.has_access():
            self.ui.alert("This app is already authorized.")
            return
        platform_monitoring.log_event("auth.authorize.link", {})
        self.ui.show_authorization_link(auth.authorization_url())

    def complete_authorization(self, code: str, state: Optional[str]) -> bool:
        granted = self._require_auth().handle_callback(code, state)
        if granted:
            self.ui.alert("Success!", "Authorization complete.")
        else:
            self.ui.alert("Denied.", "Authorization was not granted.")
        return granted

    def deauthorize(self) -> None:
        self._require_auth().reset()
        self.ui.alert("Access deauthorized.")


__all__ = ["ActionRunner", "ActionResult", "SUCCESS", "NO_RESULTS", "CANCELLED", "ERROR"]
