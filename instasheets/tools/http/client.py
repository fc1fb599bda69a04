"""HTTP JSON client for the Instagram v1 REST API.

Issues exactly one GET per call and decodes the body into an `Envelope`.
The client is intentionally thin: pagination lives in `Paginator` and
URL construction in `EndpointCatalog`.

Notes
-----
- HTTP error statuses are not raised by the transport. Instagram reports
  failures inside the JSON status envelope (`meta.code`), so the body is
  always decoded and the envelope decides.
- The body is parsed with `Response.json()`, which detects the UTF encoding
  of the raw bytes instead of trusting the charset guess behind `.text`.
- No retries. Network failures and non-JSON bodies surface as TransportError.
"""

from __future__ import annotations

import time
from typing import Any, Optional
from urllib.parse import urlsplit

import requests

import platform_monitoring
from instasheets.config import api_config
from instasheets.exceptions import ApiError, TransportError
from instasheets.utils.envelope import Envelope


def endpoint_label(url: str) -> str:
	"""Return the URL path (no query string) for logs."""
	return urlsplit(url).path or "/"


class HttpJsonClient:
	def __init__(self, session: Optional[Any] = None, timeout: Optional[float] = api_config.HTTP_TIMEOUT):
		self.session = session or requests.Session()
		self.timeout = timeout

	def _headers(self):
		return {"Accept": "application/json"}

	def fetch_json(self, url: str) -> Envelope:
		"""GET `url` and return its envelope; raise ApiError when meta.code != 200."""
		endpoint = endpoint_label(url)
		start = time.time()
		platform_monitoring.log_event("http.fetch.begin", {"url": url})
		try:
			try:
				resp = self.session.get(url, headers=self._headers(), timeout=self.timeout)
			except requests.RequestException as e:
				raise TransportError(f"Request to {endpoint} failed: {e}") from e
			try:
				body = resp.json()
			except ValueError as e:  # requests' JSONDecodeError is a ValueError
				raise TransportError(f"Response body from {endpoint} is not JSON: {e}") from e
			envelope = Envelope.from_dict(body)
			platform_monitoring.log_event(
				"http.fetch.end",
				{
					"endpoint": endpoint,
					"http_status": resp.status_code,
					"code": envelope.code,
					"duration_ms": _elapsed_ms(start),
				},
			)
			envelope.raise_for_status()
			return envelope
		except (ApiError, TransportError) as e:
			platform_monitoring.log_event(
				"http.fetch.error",
				{"url": url, "error": str(e), "duration_ms": _elapsed_ms(start)},
			)
			raise


def _elapsed_ms(start: float) -> float:
	return round((time.time() - start) * 1000.0, 2)


__all__ = ["HttpJsonClient", "endpoint_label"]
