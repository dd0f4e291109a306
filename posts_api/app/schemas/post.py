"""
Pydantic schema for posts.

A post is an ``(id, body)`` pair.  Ids are assigned by the store; any
``id`` a client submits is decoded but never used to pick the target
of an operation.

Submitted documents are decoded leniently in shape and strictly in
type, the way a JSON object decodes into a struct:

* keys match field names case‑insensitively (``"Body"`` sets ``body``),
  and when several keys map to one field the last one wins;
* unknown keys are ignored;
* missing fields and ``null`` values leave the zero value in place, and
  a ``null`` document decodes to an empty post;
* wrong types (``{"body": 5}``, ``{"id": "3"}``) are rejected.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Post(BaseModel):
    """Schema for a post, used both as request body and response."""

    model_config = ConfigDict(strict=True)

    id: int = Field(0, description="Identifier assigned by the store")
    body: str = Field("", description="Text content of the post")

    @model_validator(mode="before")
    @classmethod
    def fold_field_names(cls, data: Any) -> Any:
        """Map submitted keys onto fields, dropping ``null`` values."""
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        fields = {name.casefold(): name for name in cls.model_fields}
        folded = {}
        for key, value in data.items():
            name = fields.get(key.casefold()) if isinstance(key, str) else None
            if name is not None and value is not None:
                folded[name] = value
        return folded
