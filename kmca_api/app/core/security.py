"""
Security helpers: the admin secret check and contact password hashing.

Case mutations are gated by a single shared secret sent in the
``X-KMCA-Admin`` header.  Contact entries are protected by their own
passwords, stored only as SHA‑256 hex digests.  The two mechanisms are
unrelated: the admin secret does not open contact entries and an entry
password does not authorize case changes.
"""

import hashlib
import hmac
import logging
from typing import Any

from fastapi import Request

from .config import Settings
from .errors import ServerMisconfigured, Unauthorized

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the app was created with."""
    return request.app.state.settings


def is_authorized(request: Request, settings: Settings) -> bool:
    """Return ``True`` if the admin header equals the configured secret."""
    if not settings.admin_secret:
        return False
    header_value = request.headers.get(settings.admin_header)
    if header_value is None:
        return False
    return hmac.compare_digest(header_value.encode("utf-8"), settings.admin_secret.encode("utf-8"))


def require_admin(request: Request) -> None:
    """Dependency that enforces the admin secret.

    Raises
    ------
    ServerMisconfigured
        No secret is configured; the route fails closed with 500.
    Unauthorized
        The header is missing or does not match (401).
    """
    settings = get_settings(request)
    if not settings.admin_secret:
        logger.error("Admin request to %s rejected: KMCA_API_SECRET is not set", request.url.path)
        raise ServerMisconfigured()
    if not is_authorized(request, settings):
        logger.warning("Admin authentication failed for %s %s", request.method, request.url.path)
        raise Unauthorized("관리자 인증이 필요합니다.")


def hash_password(password: str) -> str:
    """Return the SHA‑256 hex digest of ``password``.

    The digest is unsalted so that it stays compatible with entries
    already stored in ``contact.json``.
    """
    return hashlib.sha256(str(password).encode("utf-8")).hexdigest()


def verify_password(plain_password: str, hashed_password: Any) -> bool:
    """Check ``plain_password`` against a stored digest.

    A missing or non-string stored digest never matches.
    """
    if not isinstance(hashed_password, str) or not hashed_password:
        return False
    return hmac.compare_digest(
        hash_password(plain_password).encode("utf-8"), hashed_password.encode("utf-8")
    )
