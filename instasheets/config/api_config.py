"""Central configuration for the Instagram API client.

All values can be overridden by environment variables.

Also includes guard rails for:
- Pagination (page ceiling)
- Flattening (maximum nesting depth)
- Token storage (property key / Redis namespace)
"""
from __future__ import annotations

import os
from typing import List, Optional

# Endpoints
API_BASE_URL = os.getenv("INSTAGRAM_API_BASE_URL", "https://api.instagram.com/v1/")
AUTHORIZATION_BASE_URL = os.getenv("INSTAGRAM_AUTHORIZATION_URL", "https://api.instagram.com/oauth/authorize/")
TOKEN_URL = os.getenv("INSTAGRAM_TOKEN_URL", "https://api.instagram.com/oauth/access_token")

DEFAULT_SCOPES: List[str] = [
    "basic",
    "public_content",
    "follower_list",
    "comments",
    "relationships",
    "likes",
]

# -------------------------
# Guard rails
# -------------------------

# Pagination ceiling; a chain longer than this is treated as a misbehaving API
MAX_PAGES = int(os.getenv("INSTAGRAM_MAX_PAGES", "500"))

# Flattening depth guard for nested JSON
MAX_FLATTEN_DEPTH = int(os.getenv("INSTAGRAM_MAX_FLATTEN_DEPTH", "256"))

# No local timeout unless explicitly configured (seconds)
HTTP_TIMEOUT: Optional[float] = float(os.getenv("INSTAGRAM_HTTP_TIMEOUT", "0") or 0) or None

# -------------------------
# Token storage
# -------------------------
TOKEN_KEY = os.getenv("INSTAGRAM_TOKEN_KEY", "oauth2.instagram")
NAMESPACE = os.getenv("REDIS_NAMESPACE", "instasheets")


def get_scopes() -> List[str]:
    """Return OAuth scopes, honouring a comma separated INSTAGRAM_SCOPES override."""
    raw = os.getenv("INSTAGRAM_SCOPES")
    if not raw:
        return list(DEFAULT_SCOPES)
    return [s.strip() for s in raw.split(",") if s.strip()]


__all__ = [
    "API_BASE_URL",
    "AUTHORIZATION_BASE_URL",
    "TOKEN_URL",
    "DEFAULT_SCOPES",
    "MAX_PAGES",
    "MAX_FLATTEN_DEPTH",
    "HTTP_TIMEOUT",
    "TOKEN_KEY",
    "NAMESPACE",
    "get_scopes",
]
