"""
Pydantic schemas for contact entries and their replies.

Contact entries are public inquiries.  The stored record carries a
``passwordHash``; none of the read schemas below declare it, and the
service builds their input from an explicit projection, so the digest
never appears in a response.  The list view additionally drops the
body and the replies, exposing only ``hasReplies`` and ``replyCount``.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import raw_text_or_none, text_or_none


class ContactEntryCreate(BaseModel):
    """Schema for submitting a new inquiry."""

    id: Optional[str] = Field(None, description="Explicit id; generated as contact-<ms> when omitted")
    categoryValue: Optional[str] = None
    categoryLabel: Optional[str] = None
    title: Optional[str] = None
    body: Optional[str] = None
    authorName: Optional[str] = None
    password: Optional[str] = Field(None, description="Plain password, hashed before storage")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        return raw_text_or_none(v)

    @field_validator(
        "categoryValue", "categoryLabel", "title", "body", "authorName", "password", mode="before"
    )
    @classmethod
    def _coerce_text(cls, v):
        return text_or_none(v)


class ContactPassword(BaseModel):
    """Body of the view and delete requests."""

    password: Optional[str] = None

    @field_validator("password", mode="before")
    @classmethod
    def _coerce_text(cls, v):
        return text_or_none(v)


class ReplyCreate(BaseModel):
    """Body of a reply request: the entry password plus the reply."""

    password: Optional[str] = None
    author: Optional[str] = None
    body: Optional[str] = None

    @field_validator("password", "author", "body", mode="before")
    @classmethod
    def _coerce_text(cls, v):
        return text_or_none(v)


class ReplyRead(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None
    author: Optional[Any] = None
    body: Optional[Any] = None
    createdAt: Optional[Any] = None


class ContactEntrySummary(BaseModel):
    """Sanitized projection used by the public listing.

    Like ``CaseRead`` it accepts whatever the stored entry holds; only
    the derived reply fields are always present.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None
    categoryValue: Optional[Any] = None
    categoryLabel: Optional[Any] = None
    title: Optional[Any] = None
    authorName: Optional[Any] = None
    createdAt: Optional[Any] = None
    hasReplies: bool = False
    replyCount: int = 0


class ContactEntryRead(ContactEntrySummary):
    """Full entry returned to the author after a password check."""

    body: Optional[Any] = None
    replies: List[Union[ReplyRead, Any]] = []


class ContactEntryResponse(BaseModel):
    success: bool = True
    entry: ContactEntryRead


class ContactEntryListResponse(BaseModel):
    success: bool = True
    entries: List[ContactEntrySummary]
