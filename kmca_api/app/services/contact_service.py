"""
Business logic for contact entries (public inquiries).

Anyone may submit an inquiry.  The submitter picks a password, which
is stored only as a SHA‑256 digest; the same password is later
required to read the full entry, to append a reply or to delete it.
The public listing never exposes the body, the replies or the digest.

Note that replies are gated by the entry password alone.  There is no
separate admin check on that route, so anyone who knows an entry's
password can reply to it.

The service works on plain dict records loaded from the store and
returns projections built by :func:`sanitize_entry`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from ..core.errors import NotFound, Unauthorized, ValidationError
from ..core.security import hash_password, verify_password
from ..core.store import JsonFileStore, Record
from ..core.timeutils import make_id, sort_newest_first, utc_now_iso
from ..schemas.contact import ContactEntryCreate, ReplyCreate

logger = logging.getLogger(__name__)

ANONYMOUS = "익명"
DEFAULT_REPLY_AUTHOR = "관리자"

# Keys never returned by any contact response.
_PRIVATE_KEYS = ("passwordHash", "passwordHint")

MSG_CREATE_REQUIRED = "제목, 본문, 비밀번호는 필수 입력 항목입니다."
MSG_PASSWORD_REQUIRED = "비밀번호를 입력해주세요."
MSG_REPLY_REQUIRED = "비밀번호와 답변 내용을 모두 입력해주세요."
MSG_NOT_FOUND = "문의 글을 찾을 수 없습니다."
MSG_BAD_PASSWORD = "비밀번호가 올바르지 않습니다."


def sanitize_entry(
    entry: Record,
    include_body: bool = False,
    include_replies: bool = False,
) -> Dict[str, Any]:
    """Build the response projection of a stored entry.

    ``passwordHash`` and ``passwordHint`` are always dropped.  ``body``
    and ``replies`` are dropped unless requested; ``hasReplies`` and
    ``replyCount`` are always derived from the stored replies.
    """
    replies = entry.get("replies")
    if not isinstance(replies, list):
        replies = []
    projection = {
        key: value
        for key, value in entry.items()
        if key not in _PRIVATE_KEYS and key not in ("body", "replies")
    }
    projection["hasReplies"] = len(replies) > 0
    projection["replyCount"] = len(replies)
    if include_body:
        projection["body"] = entry.get("body", "")
    if include_replies:
        projection["replies"] = replies
    return projection


def _full(entry: Record) -> Dict[str, Any]:
    return sanitize_entry(entry, include_body=True, include_replies=True)


class ContactService:
    """Service for handling contact entries and their replies."""

    @classmethod
    async def list_entries(cls, store: JsonFileStore) -> List[Dict[str, Any]]:
        """Return the sanitized listing, newest first."""
        entries = [sanitize_entry(entry) for entry in store.get_all()]
        return sort_newest_first(entries)

    @classmethod
    async def create_entry(cls, store: JsonFileStore, data: ContactEntryCreate) -> Dict[str, Any]:
        """Store a new inquiry and return its full projection.

        Raises
        ------
        ValidationError
            ``title``, ``body`` or ``password`` is missing or blank.
        """
        if not data.title or not data.body or not data.password:
            raise ValidationError(MSG_CREATE_REQUIRED)

        entry: Record = {
            "id": data.id or make_id("contact"),
            "categoryValue": data.categoryValue or None,
            "categoryLabel": data.categoryLabel or None,
            "title": data.title,
            "body": data.body,
            "authorName": data.authorName or ANONYMOUS,
            "passwordHash": hash_password(data.password),
            "createdAt": utc_now_iso(),
            "replies": [],
        }

        entries = store.get_all()
        entries.append(entry)
        store.replace_all(entries)
        logger.info("Created contact entry %s", entry["id"])
        return _full(entry)

    @classmethod
    def _authorize(cls, entries: List[Record], entry_id: str, password: str) -> Tuple[int, Record]:
        """Locate ``entry_id`` and check its password.

        Returns the index and the record.  Raises ``NotFound`` or
        ``Unauthorized``.
        """
        for index, entry in enumerate(entries):
            if entry.get("id") == entry_id:
                break
        else:
            raise NotFound(MSG_NOT_FOUND)
        if not verify_password(password, entry.get("passwordHash")):
            logger.warning("Password mismatch for contact entry %s", entry_id)
            raise Unauthorized(MSG_BAD_PASSWORD)
        return index, entry

    @classmethod
    async def view_entry(cls, store: JsonFileStore, entry_id: str, password: str) -> Dict[str, Any]:
        """Return the full entry (body and replies) after a password check."""
        if not password:
            raise ValidationError(MSG_PASSWORD_REQUIRED)
        _, entry = cls._authorize(store.get_all(), entry_id, password)
        return _full(entry)

    @classmethod
    async def add_reply(cls, store: JsonFileStore, entry_id: str, data: ReplyCreate) -> Dict[str, Any]:
        """Append a reply to ``entry_id`` and return the updated entry.

        Replies keep insertion order; the new one goes after any
        existing replies.
        """
        if not data.password or not data.body:
            raise ValidationError(MSG_REPLY_REQUIRED)

        entries = store.get_all()
        index, entry = cls._authorize(entries, entry_id, data.password)

        reply = {
            "id": make_id("reply"),
            "author": data.author or DEFAULT_REPLY_AUTHOR,
            "body": data.body,
            "createdAt": utc_now_iso(),
        }
        replies = entry.get("replies")
        if not isinstance(replies, list):
            replies = []
        entry["replies"] = replies + [reply]
        entries[index] = entry
        store.replace_all(entries)
        logger.info("Added reply %s to contact entry %s", reply["id"], entry_id)
        return _full(entry)

    @classmethod
    async def delete_entry(cls, store: JsonFileStore, entry_id: str, password: str) -> None:
        """Remove ``entry_id`` after a password check."""
        if not password:
            raise ValidationError(MSG_PASSWORD_REQUIRED)

        entries = store.get_all()
        index, _ = cls._authorize(entries, entry_id, password)
        store.replace_all(entries[:index] + entries[index + 1:])
        logger.info("Deleted contact entry %s", entry_id)
