"""
Pydantic schemas for cases.

A case is a public case study written by an administrator.  Records
are stored as camelCase JSON objects in ``cases.json``; the read
schema keeps that naming and preserves any extra keys found in stored
records (e.g. fields carried by seed data).
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import raw_text_or_none, text_or_none


class CaseCreate(BaseModel):
    """Schema for creating a case.

    All fields are optional at this level; ``title`` and ``body`` are
    checked by the service so a missing value yields a 400.
    """

    id: Optional[str] = Field(None, description="Explicit id; generated as case-<ms> when omitted")
    categoryValue: Optional[str] = None
    categoryLabel: Optional[str] = None
    title: Optional[str] = None
    body: Optional[str] = None
    author: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        return raw_text_or_none(v)

    @field_validator("categoryValue", "categoryLabel", "title", "body", "author", mode="before")
    @classmethod
    def _coerce_text(cls, v):
        return text_or_none(v)


class CaseRead(BaseModel):
    """Schema for reading a case.

    Stored records are returned as they are: seed data may lack fields
    or carry other types, so nothing here is required or coerced.
    Routes serialize with ``response_model_exclude_unset`` and keys
    missing from the record stay missing in the response.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None
    categoryValue: Optional[Any] = None
    categoryLabel: Optional[Any] = None
    title: Optional[Any] = None
    body: Optional[Any] = None
    author: Optional[Any] = None
    views: Optional[Any] = None
    createdAt: Optional[Any] = None
    isDefault: Optional[Any] = None


class CaseResponse(BaseModel):
    success: bool = True
    case: CaseRead


class CaseListResponse(BaseModel):
    success: bool = True
    cases: List[CaseRead]
