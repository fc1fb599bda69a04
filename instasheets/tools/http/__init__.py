"""HTTP layer: JSON client and pagination.

Keep this file light; modules are imported directly
(`instasheets.tools.http.client`, `instasheets.tools.http.paginator`).
"""
