"""In-memory property store for tests and single-process runs."""

from __future__ import annotations

from typing import Dict, Optional


class InMemoryPropertyStore:
	def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
		self._props: Dict[str, str] = dict(initial or {})

	def get(self, key: str) -> Optional[str]:
		return self._props.get(key)

	def set(self, key: str, value: str) -> None:
		self._props[key] = value

	def delete(self, key: str) -> None:
		self._props.pop(key, None)


__all__ = ["InMemoryPropertyStore"]
