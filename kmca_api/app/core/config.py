"""
Simple configuration management.

The ``Settings`` dataclass reads configuration from environment
variables (optionally seeded from a ``.env`` file at the project root).
It is frozen: build it once at startup with ``Settings.from_env()`` and
pass it to ``create_app``.  Handlers reach it through
``request.app.state.settings`` instead of a module global, which lets
tests inject their own data directory and admin secret.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# kmca_api/app/core/config.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

ADMIN_HEADER = "X-KMCA-Admin"


def _resolve_data_dir(value: Optional[str]) -> Path:
    """Resolve ``DATA_DIR`` relative to the project root."""
    if not value:
        return PROJECT_ROOT / "data"
    path = Path(value)
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    project_name: str = "KMCA Site API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 5174

    # Shared secret gating case mutations.  An empty value means the
    # server is not configured and every admin request fails with 500.
    admin_secret: str = ""
    admin_header: str = ADMIN_HEADER

    data_dir: Path = field(default_factory=lambda: PROJECT_ROOT / "data")

    @property
    def cases_file(self) -> Path:
        return Path(self.data_dir) / "cases.json"

    @property
    def contact_file(self) -> Path:
        return Path(self.data_dir) / "contact.json"

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Settings":
        """Build settings from the process environment.

        Values in ``env_file`` (``<project root>/.env`` by default) are
        loaded first but never override variables that are already set.
        """
        load_dotenv(env_file or PROJECT_ROOT / ".env", override=False)
        return cls(
            project_name=os.getenv("PROJECT_NAME", "KMCA Site API"),
            api_version=os.getenv("API_VERSION", "1.0.0"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5174")),
            admin_secret=os.getenv("KMCA_API_SECRET", ""),
            data_dir=_resolve_data_dir(os.getenv("DATA_DIR")),
        )
