"""JSON record store.

INVARIANT: The file is the only persistence boundary. It is read once
per invocation and written wholesale, never patched in place.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from staffctl.domain.employee import Employee
from staffctl.errors import StoreError

logger = logging.getLogger(__name__)

_EMPLOYEE_LIST = TypeAdapter(list[Employee])


class RecordStore:
    """Loads and persists the ordered employee list as one JSON array."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> list[Employee]:
        """Read every record, preserving file order.

        Raises:
            StoreError: If the file is missing, unreadable, or malformed.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Can't read the file %s", self.path)
            msg = f"Can't read the file {self.path}: {exc.strerror or exc}"
            raise StoreError(msg) from exc
        except UnicodeDecodeError as exc:
            logger.error("File %s is not valid UTF-8", self.path)
            msg = f"Can't read the file {self.path}: not valid UTF-8 (byte {exc.start})"
            raise StoreError(msg) from exc

        try:
            employees = _EMPLOYEE_LIST.validate_json(raw)
        except ValidationError as exc:
            logger.error("Invalid employee data in %s", self.path)
            msg = f"Invalid employee data in {self.path}: {exc.error_count()} error(s)"
            raise StoreError(msg) from exc

        logger.debug("Loaded %d employees from %s", len(employees), self.path)
        return employees

    def save(self, employees: list[Employee]) -> None:
        """Overwrite the file with *employees*, pretty-printed.

        Raises:
            StoreError: If the file cannot be written.
        """
        logger.debug("Writing %d employees to %s", len(employees), self.path)
        payload = json.dumps([e.to_record() for e in employees], indent=2, ensure_ascii=False)
        try:
            self.path.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error("Can't write the file %s", self.path)
            msg = f"Can't write the file {self.path}: {exc.strerror or exc}"
            raise StoreError(msg) from exc
