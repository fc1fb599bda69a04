"""OAuth2 authorization-code flow for Instagram.

`OAuth2Service` builds the authorization URL the user opens in a browser,
exchanges the returned code for an access token, and keeps the token in a
`PropertyStore`. Data actions only ever call `has_access` and
`get_access_token`; authorize / deauthorize are separate user actions.
"""

from __future__ import annotations

import hmac
import json
import secrets
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

import platform_monitoring
from instasheets.config import api_config
from instasheets.exceptions import AuthMissingError, TransportError
from instasheets.tools.auth.interface import PropertyStore


class OAuth2Service:
    """Authorization-code OAuth2 service backed by a property store.

    Usage:
        svc = OAuth2Service(client_id, client_secret, redirect_uri, store)
        url = svc.authorization_url()       # user opens this
        svc.handle_callback(code, state)    # both from the redirect
        svc.get_access_token()
    """

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        redirect_uri: Optional[str],
        store: PropertyStore,
        scopes: Optional[List[str]] = None,
        authorization_base_url: str = api_config.AUTHORIZATION_BASE_URL,
        token_url: str = api_config.TOKEN_URL,
        token_key: str = api_config.TOKEN_KEY,
        session: Optional[Any] = None,
        timeout: Optional[float] = api_config.HTTP_TIMEOUT,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.store = store
        self.scopes = scopes if scopes is not None else api_config.get_scopes()
        self.authorization_base_url = authorization_base_url
        self.token_url = token_url
        self.token_key = token_key
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def from_settings(cls, store: PropertyStore, **kwargs: Any) -> "OAuth2Service":
        from config import settings  # local import so .env is only read when needed

        return cls(
            settings.INSTAGRAM_CLIENT_ID,
            settings.INSTAGRAM_CLIENT_SECRET,
            settings.INSTAGRAM_REDIRECT_URI,
            store,
            **kwargs,
        )

    # -------- authorization flow --------
    @property
    def state_key(self) -> str:
        return f"{self.token_key}.state"

    def authorization_url(self, state: Optional[str] = None) -> str:
        """Build the URL the user opens; the state is remembered for the callback."""
        state = state or secrets.token_urlsafe(16)
        self.store.set(self.state_key, state)
        params = {
            "client_id": self.client_id or "",
            "redirect_uri": self.redirect_uri or "",
            "response_type": "code",
            "scope": " ".join(self.scopes),
            "state": state,
        }
        return f"{self.authorization_base_url}?{urlencode(params)}"

    def handle_callback(self, code: str, state: Optional[str]) -> bool:
        """Exchange an authorization code for a token. Returns True on success.

        A callback whose state does not match the one issued by
        `authorization_url` is rejected without contacting the token endpoint.
        """
        expected = self.store.get(self.state_key)
        if not expected or not state or not hmac.compare_digest(expected.encode(), state.encode()):
            platform_monitoring.log_event("auth.callback.state_mismatch", {"issued": bool(expected)})
            return False
        self.store.delete(self.state_key)
        form = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": "authorization_code",
            "redirect_uri": self.redirect_uri,
            "code": code,
        }
        try:
            resp = self.session.post(self.token_url, data=form, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Token exchange failed: {e}") from e
        try:
            token = resp.json()
        except ValueError as e:
            raise TransportError(f"Token endpoint returned non-JSON body: {e}") from e
        if not isinstance(token, dict) or not token.get("access_token"):
            platform_monitoring.log_event(
                "auth.callback.denied",
                {"http_status": resp.status_code, "error": _error_text(token)},
            )
            return False
        self.store.set(self.token_key, json.dumps(token))
        platform_monitoring.log_event("auth.callback.granted", {"scopes": self.scopes})
        return True

    def reset(self) -> None:
        self.store.delete(self.token_key)
        platform_monitoring.log_event("auth.reset", {})

    # -------- token access --------
    def _token(self) -> Optional[Dict[str, Any]]:
        raw = self.store.get(self.token_key)
        if not raw:
            return None
        try:
            token = json.loads(raw)
        except json.JSONDecodeError:
            return None
        return token if isinstance(token, dict) else None

    def has_access(self) -> bool:
        token = self._token()
        return bool(token and token.get("access_token"))

    def get_access_token(self) -> str:
        token = self._token()
        if not token or not token.get("access_token"):
            raise AuthMissingError()
        return str(token["access_token"])


def _error_text(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        return body.get("error_message") or body.get("error_description") or body.get("error")
    return None


__all__ = ["OAuth2Service"]
