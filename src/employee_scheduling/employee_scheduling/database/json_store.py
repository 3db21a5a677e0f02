from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..core.constants import JSON_INDENT
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Reads and writes the flat record files (``employees.json`` ...).

    Every call re-reads the file from disk; nothing is cached between calls.
    """

    def __init__(self, data_dir: str | Path):
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, file_name: str) -> Path:
        return self._data_dir / file_name

    def read_records(self, file_name: str) -> List[Dict[str, Any]]:
        path = self.path_for(file_name)
        if not path.exists():
            return []

        text = path.read_text(encoding="utf-8").strip()
        if not text:
            return []

        try:
            data = json.loads(text)
        except ValueError as e:
            raise StorageError(f"{path} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise StorageError(f"{path} must contain a JSON array")
        if not all(isinstance(record, dict) for record in data):
            raise StorageError(f"{path} must contain only JSON objects")
        return data

    def write_records(self, file_name: str, records: List[Dict[str, Any]]) -> None:
        path = self.path_for(file_name)
        path.parent.mkdir(parents=True, exist_ok=True)

        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(json.dumps(records, ensure_ascii=False, indent=JSON_INDENT), encoding="utf-8")
        tmp.replace(path)
        logger.debug("Wrote %d records to %s", len(records), path)
