"""
Pydantic schema definitions for the catalog module.

``Book`` mirrors the record served by the upstream catalog and by the
JSON routes of this service. Every descriptive field is free text and
defaults to an empty string, so a client can send a partial record
(``{"title": "A"}``) and get the remaining fields back empty. The
``CatalogResponse`` model is the envelope returned by the upstream
API; only its ``data`` list is consumed.
"""

from typing import List

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class Book(BaseModel):
    """A single book entry.

    ``id`` is owned by the store: it is ignored on insert and forced
    to the requested identifier on update. Unknown keys in incoming
    JSON are dropped. A JSON ``null`` decodes to the field's
    default (empty string, or 0 for ``id``).
    """

    id: int = 0
    title: str = ""
    author: str = ""
    genre: str = ""
    description: str = ""
    isbn: str = ""
    image: str = ""
    published: str = ""
    publisher: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class CatalogResponse(BaseModel):
    """Envelope returned by the upstream catalog endpoint."""

    status: str = ""
    code: int = 0
    total: int = 0
    data: List[Book] = Field(default_factory=list)
