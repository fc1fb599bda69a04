"""Redis-backed property store.

Environment variables supported:
- REDIS_URL: full connection URL (preferred)
- REDIS_HOST (default: localhost)
- REDIS_PORT (default: 6379)
- REDIS_DB (default: 0)
- REDIS_PASSWORD (optional)
- REDIS_NAMESPACE (default: instasheets) used to prefix keys
"""
from __future__ import annotations

import os
from typing import Any, Optional

import redis

from instasheets.config import api_config


class RedisPropertyStore:
	"""Persist OAuth properties in Redis so tokens survive between CLI runs.

	If REDIS_URL is set, it is preferred (handles TLS via rediss://). Otherwise,
	falls back to host/port/db/password envs.
	"""

	def __init__(
		self,
		url: Optional[str] = None,
		host: Optional[str] = None,
		port: Optional[int] = None,
		db: Optional[int] = None,
		password: Optional[str] = None,
		namespace: Optional[str] = None,
		client: Optional[Any] = None,
	):
		self.ns = namespace if namespace is not None else api_config.NAMESPACE
		if client is not None:
			self.client = client
			return
		url = url or os.getenv("REDIS_URL")
		if url:
			self.client = redis.from_url(url, decode_responses=True)
		else:
			self.client = redis.Redis(
				host=host or os.getenv("REDIS_HOST", "localhost"),
				port=int(port or os.getenv("REDIS_PORT", "6379")),
				db=int(db or os.getenv("REDIS_DB", "0")),
				password=password or os.getenv("REDIS_PASSWORD"),
				decode_responses=True,
			)

	def _key(self, key: str) -> str:
		"""Prefix key with namespace."""
		return f"{self.ns}:props:{key}" if self.ns else f"props:{key}"

	def get(self, key: str) -> Optional[str]:
		return self.client.get(self._key(key))

	def set(self, key: str, value: str) -> None:
		self.client.set(self._key(key), value)

	def delete(self, key: str) -> None:
		self.client.delete(self._key(key))


__all__ = ["RedisPropertyStore"]
