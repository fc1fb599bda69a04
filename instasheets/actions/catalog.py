"""Endpoint catalog: logical actions -> Instagram endpoints.

Each `ActionSpec` names an endpoint path template and the inputs the user
is prompted for. `EndpointCatalog.invoke` builds the request URL::

    {base_url}{endpoint_path}?{key=value&...}access_token={token}

and hands it to the paginator. Query values and path placeholders are
percent-encoded like JavaScript's encodeURIComponent, so a space becomes
%20 and ``/`` in an id cannot escape its path segment.

See https://www.instagram.com/developer/endpoints/ for the API surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import Formatter
from typing import Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote

import platform_monitoring
from instasheets.actions.inputs import (
    COUNT_INPUT,
    LATITUDE,
    LOCATION_DISTANCE,
    LOCATION_ID,
    LONGITUDE,
    MEDIA_DISTANCE,
    MEDIA_ID,
    TAG_NAME,
    TAG_QUERY,
    USER_ID,
    USER_QUERY,
    InputSpec,
)
from instasheets.config import api_config
from instasheets.tools.auth.interface import TokenProvider
from instasheets.tools.http.paginator import Paginator
from instasheets.utils.json_tree import JsonNode

# characters encodeURIComponent leaves alone besides the RFC 3986 unreserved set
_COMPONENT_SAFE = "!*'()"


@dataclass(frozen=True)
class ActionSpec:
    name: str
    section: str
    label: str
    path: str
    inputs: Tuple[InputSpec, ...] = ()
    # query parameter order when it differs from prompt order
    param_order: Tuple[str, ...] = ()

    @property
    def placeholders(self) -> List[str]:
        return [field for _, field, _, _ in Formatter().parse(self.path) if field]


SECTIONS: Tuple[str, ...] = (
    "Users",
    "Relationships",
    "Media",
    "Comments",
    "Likes",
    "Tags",
    "Locations",
)

ACTIONS: Tuple[ActionSpec, ...] = (
    # Users
    ActionSpec("users_self", "Users", "Get data about me", "users/self"),
    ActionSpec("users_user_id", "Users", "Get data about a user", "users/{user_id}", (USER_ID,)),
    ActionSpec("users_self_media_recent", "Users", "Get my recent posts", "users/self/media/recent", (COUNT_INPUT,)),
    ActionSpec(
        "users_user_id_media_recent",
        "Users",
        "Get a user's recent posts",
        "users/{user_id}/media/recent",
        (USER_ID, COUNT_INPUT),
    ),
    ActionSpec("users_self_media_liked", "Users", "Get the posts I recently liked", "users/self/media/liked", (COUNT_INPUT,)),
    ActionSpec("users_search", "Users", "Search for a user by name", "users/search", (USER_QUERY, COUNT_INPUT)),
    # Relationships
    ActionSpec("users_self_follows", "Relationships", "Get the list of users I follow", "users/self/follows"),
    ActionSpec("users_self_followed_by", "Relationships", "Get the list of users who follow me", "users/self/followed-by"),
    ActionSpec(
        "users_self_requested_by",
        "Relationships",
        "List the users who have requested to follow me",
        "users/self/requested-by",
    ),
    ActionSpec(
        "users_user_id_relationship",
        "Relationships",
        "Get information about my relationship with a user",
        "users/{user_id}/relationship",
        (USER_ID,),
    ),
    # Media
    ActionSpec("media_media_id", "Media", "Get information about a post", "media/{media_id}", (MEDIA_ID,)),
    ActionSpec(
        "media_search",
        "Media",
        "Search for recent media in a given area",
        "media/search",
        (LATITUDE, LONGITUDE, MEDIA_DISTANCE),
        param_order=("distance", "lat", "lng"),
    ),
    # Comments
    ActionSpec(
        "media_media_id_comments",
        "Comments",
        "Get a list of recent comments made on a post",
        "media/{media_id}/comments",
        (MEDIA_ID,),
    ),
    # Likes
    ActionSpec(
        "media_media_id_likes",
        "Likes",
        "Get a list users who have liked a post",
        "media/{media_id}/likes",
        (MEDIA_ID,),
    ),
    # Tags
    ActionSpec("tags_tag_name", "Tags", "Get information about a hashtag", "tags/{tag_name}", (TAG_NAME,)),
    ActionSpec(
        "tags_tag_name_media_recent",
        "Tags",
        "Get the posts recently tagged with a hashtag",
        "tags/{tag_name}/media/recent",
        (TAG_NAME, COUNT_INPUT),
    ),
    ActionSpec("tags_search", "Tags", "Search for a hashtag by name", "tags/search", (TAG_QUERY,)),
    # Locations
    ActionSpec(
        "locations_location_id",
        "Locations",
        "Get information about a location",
        "locations/{location_id}",
        (LOCATION_ID,),
    ),
    ActionSpec(
        "locations_location_id_media_recent",
        "Locations",
        "Get a list of recent posts from a given location",
        "locations/{location_id}/media/recent",
        (LOCATION_ID,),
    ),
    ActionSpec(
        "locations_search",
        "Locations",
        "Search for a location by geographic coordinates",
        "locations/search",
        (LATITUDE, LONGITUDE, LOCATION_DISTANCE),
        param_order=("distance", "lat", "lng"),
    ),
)


def encode_component(value: object) -> str:
    """Percent-encode like encodeURIComponent."""
    return quote(str(value), safe=_COMPONENT_SAFE)


def encode_params(params: Optional[Mapping[str, object]] = None, escape: bool = True) -> str:
    """Render params as ``?k=v&k2=v2&`` in mapping order ("?" when empty)."""
    enc = encode_component if escape else str
    return "?" + "".join(f"{enc(k)}={enc(v)}&" for k, v in (params or {}).items())


class EndpointCatalog:
    """Registry of endpoint actions plus the request builder they share."""

    def __init__(
        self,
        paginator: Paginator,
        token_provider: TokenProvider,
        base_url: str = api_config.API_BASE_URL,
        actions: Tuple[ActionSpec, ...] = ACTIONS,
    ):
        self.paginator = paginator
        self.token_provider = token_provider
        self.base_url = base_url.rstrip("/") + "/"
        self._actions: Dict[str, ActionSpec] = {a.name: a for a in actions}

    # -------- registry --------
    def get(self, name: str) -> ActionSpec:
        try:
            return self._actions[name]
        except KeyError:
            raise KeyError(f"unknown action: {name}") from None

    def list(self) -> List[str]:
        return list(self._actions.keys())

    def menu(self) -> List[Tuple[str, List[ActionSpec]]]:
        """Actions grouped by menu section, in menu order."""
        return [
            (section, [a for a in self._actions.values() if a.section == section])
            for section in SECTIONS
            if any(a.section == section for a in self._actions.values())
        ]

    # -------- request building --------
    def build_request(self, spec: ActionSpec, values: Mapping[str, str]) -> Tuple[str, Dict[str, str]]:
        """Split collected values into a concrete endpoint path and query params."""
        placeholders = spec.placeholders
        path = spec.path.format(**{p: encode_component(values[p]) for p in placeholders})
        params = {k: v for k, v in values.items() if k not in placeholders}
        if spec.param_order:
            ordered = [k for k in spec.param_order if k in params]
            ordered += [k for k in params if k not in ordered]
            params = {k: params[k] for k in ordered}
        return path, params

    def build_url(self, endpoint_path: str, params: Optional[Mapping[str, object]] = None) -> str:
        token = self.token_provider.get_access_token()
        return (
            self.base_url
            + endpoint_path.lstrip("/")
            + encode_params(params)
            + f"access_token={encode_component(token)}"
        )

    def invoke(self, endpoint_path: str, params: Optional[Mapping[str, object]] = None) -> List[JsonNode]:
        url = self.build_url(endpoint_path, params)
        platform_monitoring.log_event("catalog.invoke", {"endpoint": endpoint_path, "params": dict(params or {})})
        return self.paginator.paginate(url)


__all__ = [
    "ActionSpec",
    "ACTIONS",
    "SECTIONS",
    "EndpointCatalog",
    "encode_component",
    "encode_params",
]
