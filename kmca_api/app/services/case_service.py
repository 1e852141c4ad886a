"""
Service layer for cases.

Cases are public case studies.  Anyone may list and read them; only
requests carrying the admin secret may create, delete or bump the view
counter (enforced by the endpoint dependencies, not here).

Every operation loads the full array from the store, works on it in
memory and, for mutations, writes the full array back.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..core.errors import NotFound, ValidationError
from ..core.store import JsonFileStore, Record
from ..core.timeutils import make_id, sort_newest_first, utc_now_iso
from ..schemas.case import CaseCreate

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = "관리자"


def _view_count(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


class CaseService:
    """Service class for managing cases."""

    @classmethod
    async def list_cases(cls, store: JsonFileStore) -> List[Record]:
        """Return all cases, newest first.

        Records without a usable ``createdAt`` sort as the epoch, i.e.
        last.
        """
        return sort_newest_first(store.get_all())

    @classmethod
    async def get_case(cls, store: JsonFileStore, case_id: str) -> Optional[Record]:
        """Return the case with ``case_id`` or ``None``."""
        for item in store.get_all():
            if item.get("id") == case_id:
                return item
        return None

    @classmethod
    async def create_case(cls, store: JsonFileStore, data: CaseCreate) -> Record:
        """Validate, fill defaults, append and persist a new case.

        Raises
        ------
        ValidationError
            ``title`` or ``body`` is missing or blank.
        """
        if not data.title or not data.body:
            raise ValidationError("제목과 본문은 필수 입력 항목입니다.")

        entry: Dict[str, Any] = {
            "id": data.id or make_id("case"),
            "categoryValue": data.categoryValue or None,
            "categoryLabel": data.categoryLabel or None,
            "title": data.title,
            "body": data.body,
            "author": data.author or DEFAULT_AUTHOR,
            "views": 0,
            "createdAt": utc_now_iso(),
            "isDefault": False,
        }

        cases = store.get_all()
        cases.append(entry)
        store.replace_all(cases)
        logger.info("Created case %s", entry["id"])
        return entry

    @classmethod
    async def delete_case(cls, store: JsonFileStore, case_id: str) -> None:
        """Remove the case with ``case_id``.

        Raises ``NotFound`` when nothing matched; the file is not
        rewritten in that case.
        """
        cases = store.get_all()
        next_cases = [item for item in cases if item.get("id") != case_id]
        if len(next_cases) == len(cases):
            raise NotFound("삭제할 사례가 없습니다.")
        store.replace_all(next_cases)
        logger.info("Deleted case %s", case_id)

    @classmethod
    async def increment_views(cls, store: JsonFileStore, case_id: str) -> Optional[Record]:
        """Add one to the view counter of ``case_id``.

        The matching record is replaced by a shallow copy with the new
        count; ``createdAt`` and every other field are left as stored.
        Returns the updated record, or ``None`` if the id is unknown.
        """
        cases = store.get_all()
        updated: Optional[Record] = None
        next_cases = []
        for item in cases:
            if item.get("id") == case_id:
                updated = {**item, "views": _view_count(item.get("views")) + 1}
                next_cases.append(updated)
            else:
                next_cases.append(item)
        if updated is None:
            return None
        store.replace_all(next_cases)
        logger.info("Case %s views -> %s", case_id, updated["views"])
        return updated
