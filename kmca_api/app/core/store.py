"""
Flat JSON file storage.

Each resource kind (cases, contact entries) lives in its own file
holding one JSON array.  A request loads the whole array, changes it
in memory and writes the whole array back; the file is the only state
shared between requests, and the last full write wins.

The ``get_all``/``replace_all`` pair is the interface the services
use.  To switch to another backend you would provide an object with
the same two methods and return it from ``get_store``.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List

from .config import Settings

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

CASES = "cases"
CONTACT = "contact"


class JsonFileStore:
    """A JSON array on disk, read and written in full."""

    def __init__(self, path: Path, kind: str) -> None:
        self.path = Path(path)
        self.kind = kind

    def ensure_file(self) -> None:
        """Create the file with an empty array when it does not exist.

        Called before every read and write; the file may be removed
        between requests.
        """
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("[]", encoding="utf-8")
        logger.info("[%s] created empty data file %s", self.kind, self.path)

    def load(self) -> List[Record]:
        """Return every stored record.

        A file that cannot be parsed, or that does not hold a JSON
        array, is reported and treated as empty.  Note that the next
        ``save`` then overwrites the unreadable content.
        """
        self.ensure_file()
        try:
            raw = self.path.read_text(encoding="utf-8")
            parsed = json.loads(raw)
        except (OSError, ValueError) as exc:
            logger.warning("[%s] read failed, returning empty list: %s", self.kind, exc)
            return []
        if not isinstance(parsed, list):
            logger.warning(
                "[%s] read failed, returning empty list: top-level value is %s, not an array",
                self.kind,
                type(parsed).__name__,
            )
            return []
        return parsed

    def save(self, records: List[Record]) -> None:
        """Overwrite the file with ``records``, pretty printed."""
        self.ensure_file()
        payload = json.dumps(records, ensure_ascii=False, indent=2)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            # Remove the half-written temporary file, keep the existing file.
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise

    # Interface used by the services.
    get_all = load
    replace_all = save


def get_store(settings: Settings, kind: str) -> JsonFileStore:
    """Return the store backing ``kind`` (``"cases"`` or ``"contact"``)."""
    paths = {
        CASES: settings.cases_file,
        CONTACT: settings.contact_file,
    }
    return JsonFileStore(paths[kind], kind)
