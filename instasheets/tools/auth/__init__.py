"""
OAuth2 token provider and the property stores that persist its credentials.
"""

from instasheets.tools.auth.interface import PropertyStore, TokenProvider
from instasheets.tools.auth.oauth2 import OAuth2Service

__all__ = ["PropertyStore", "TokenProvider", "OAuth2Service"]
