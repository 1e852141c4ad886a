"""
Shared schema pieces.

Request bodies are accepted leniently: a field that is not a JSON
string is treated as absent rather than rejected, so that a missing
or malformed value surfaces as a 400 from the service layer instead
of a framework validation error.
"""

from typing import Any, Optional

from pydantic import BaseModel


def text_or_none(value: Any) -> Optional[str]:
    """Return ``value`` trimmed if it is a string, else ``None``."""
    if isinstance(value, str):
        return value.strip()
    return None


def raw_text_or_none(value: Any) -> Optional[str]:
    """Like :func:`text_or_none` but without trimming (used for ids)."""
    if isinstance(value, str):
        return value
    return None


class SuccessResponse(BaseModel):
    """Envelope for operations that return no resource."""

    success: bool = True
