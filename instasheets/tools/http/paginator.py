"""Follow Instagram cursor pagination to exhaustion.

`paginate(url)` fetches the first envelope, keeps its page, and follows
`pagination.next_url` until the API stops sending one. Pages come back in
fetch order and the result is never empty on success.

Guard rails: a page ceiling and a seen-URL set stop a misbehaving API that
never ends its chain or cycles between `next_url` values.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Set

import platform_monitoring
from instasheets.config import api_config
from instasheets.exceptions import PaginationError
from instasheets.utils.envelope import Envelope
from instasheets.utils.json_tree import JsonNode


class JsonFetcher(Protocol):
    """Anything that turns a URL into an envelope (HttpJsonClient, test fakes)."""

    def fetch_json(self, url: str) -> Envelope: ...


class Paginator:
    def __init__(
        self,
        client: JsonFetcher,
        max_pages: int = api_config.MAX_PAGES,
        max_depth: int = api_config.MAX_FLATTEN_DEPTH,
    ):
        self.client = client
        self.max_pages = max_pages
        self.max_depth = max_depth

    def paginate(self, url: str) -> List[JsonNode]:
        pages: List[JsonNode] = []
        seen: Set[str] = set()
        next_url: Optional[str] = url
        while next_url:
            if len(pages) >= self.max_pages:
                raise PaginationError(f"Pagination exceeded {self.max_pages} pages")
            if next_url in seen:
                raise PaginationError("Pagination cycle detected: next_url repeated")
            seen.add(next_url)
            envelope = self.client.fetch_json(next_url)
            pages.append(envelope.page(max_depth=self.max_depth))
            platform_monitoring.log_event(
                "paginate.page",
                {"page": len(pages), "has_next": envelope.next_url is not None},
            )
            next_url = envelope.next_url
        return pages


__all__ = ["Paginator", "JsonFetcher"]
