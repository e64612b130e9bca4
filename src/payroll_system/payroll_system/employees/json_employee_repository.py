from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence, Union

from ..core.constants import JSON_INDENT
from ..core.exceptions import PersistenceError
from .model import EmployeeRecord
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class JsonEmployeeRepository(EmployeeRepository):
    """Stores the whole employee collection as one pretty-printed JSON array.

    Note: No caching, every load re-reads the file. No locking either; callers that
    interleave load/save must serialize access themselves.

    A single malformed element makes the whole file load as empty (the element
    index is logged), and the next save then replaces the file. Back the file up
    before repairing it by hand.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[EmployeeRecord]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            # First run: nothing saved yet.
            return []
        except (OSError, UnicodeDecodeError):
            logger.exception("Error reading employees file %s", self._path)
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            return [self._parse_element(i, item) for i, item in enumerate(data)]
        except ValueError as e:
            logger.error("Employees file %s is corrupted, treating it as empty: %s", self._path, e)
            return []

    @staticmethod
    def _parse_element(index: int, item: object) -> EmployeeRecord:
        try:
            return EmployeeRecord.from_dict(item)
        except ValueError as e:
            raise ValueError(f"element {index}: {e}") from e

    def save_all(self, records: Sequence[EmployeeRecord]) -> None:
        try:
            payload = json.dumps([r.to_dict() for r in records], indent=JSON_INDENT)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Cannot serialize employees: {e}") from e

        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=str(self._path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except (OSError, ValueError) as e:
            logger.error("Error writing employees file %s: %s", self._path, e)
            raise PersistenceError(f"Failed to write {self._path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temp file %s", tmp_name)
