"""Response envelope helpers.

Every Instagram v1 response is wrapped in the same envelope::

    {"meta": {"code": 200}, "data": ..., "pagination": {"next_url": "..."}}

`Envelope` decodes that shape once, exposes the status and the link to the
next page, and turns the payload into a `JsonNode` page for the flattener.
A body that does not carry a `meta.code` is not an envelope at all and is
reported as a TransportError.
"""

from dataclasses import dataclass
import json
from typing import Any, Dict, Optional

from pydantic import ValidationError

from instasheets.config import api_config
from instasheets.exceptions import ApiError, TransportError
from instasheets.utils import schemas
from instasheets.utils.json_tree import JsonNode, decode


@dataclass
class Envelope:
    """One decoded API response.

    Fields:
    - code: meta.code, 200 on success
    - error_type / error_message: set by the API on failure
    - data: the raw payload (not trusted unless code == 200)
    - next_url: pagination.next_url when the API reports another page
    """

    code: int
    data: Any = None
    next_url: Optional[str] = None
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.code == 200

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Envelope":
        try:
            model = schemas.ResponseEnvelopeModel.model_validate(d)
        except ValidationError as e:
            raise TransportError(f"Response is not a status envelope: {e}") from e
        next_url = model.pagination.next_url if model.pagination else None
        return cls(
            code=model.meta.code,
            data=model.data,
            # an empty next_url ends the chain like a missing one
            next_url=next_url or None,
            error_type=model.meta.error_type,
            error_message=model.meta.error_message,
        )

    @classmethod
    def from_json(cls, s: str) -> "Envelope":
        try:
            raw = json.loads(s)
        except json.JSONDecodeError as e:
            raise TransportError(f"Response body is not JSON: {e}") from e
        return cls.from_dict(raw)

    def raise_for_status(self) -> None:
        if not self.ok:
            raise ApiError(self.code, self.error_type, self.error_message)

    def page(self, max_depth: int = api_config.MAX_FLATTEN_DEPTH) -> JsonNode:
        """Decode the payload into a tagged JSON tree."""
        return decode(self.data, max_depth=max_depth)


__all__ = ["Envelope"]
