"""Timestamps and timestamp-derived identifiers."""

import time
from datetime import datetime, timezone
from typing import Any, Mapping


def utc_now_iso() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_millis() -> int:
    return int(time.time() * 1000)


def make_id(prefix: str) -> str:
    """Build ``<prefix>-<epoch millis>``.

    Two records created in the same millisecond share an id.
    """
    return f"{prefix}-{epoch_millis()}"


def parse_timestamp(value: Any) -> float:
    """Parse an ISO-8601 string into epoch seconds, ``0.0`` if invalid."""
    if not isinstance(value, str) or not value.strip():
        return 0.0
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return 0.0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def created_at_sort_key(record: Mapping[str, Any]) -> float:
    return parse_timestamp(record.get("createdAt"))


def sort_newest_first(records):
    """Return records ordered by ``createdAt`` descending.

    The sort is stable, so records with equal or missing timestamps keep
    their stored order.
    """
    return sorted(records, key=created_at_sort_key, reverse=True)
