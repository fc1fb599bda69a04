"""
This module defines the __init__ file for the property store adapters package.
"""

from instasheets.tools.auth.adapters.in_memory_store import InMemoryPropertyStore
from instasheets.tools.auth.adapters.redis_store import RedisPropertyStore

__all__ = ["InMemoryPropertyStore", "RedisPropertyStore"]
