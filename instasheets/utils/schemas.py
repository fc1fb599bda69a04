"""Pydantic models for the Instagram response status envelope.

Only the envelope is modelled (meta + pagination). The `data` payload is
left untyped and handed to the JSON tree decoder as-is.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class MetaModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: int
    error_type: Optional[str] = None
    error_message: Optional[str] = None


class PaginationModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    next_url: Optional[str] = None


class ResponseEnvelopeModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    meta: MetaModel
    data: Any = None
    pagination: Optional[PaginationModel] = None
