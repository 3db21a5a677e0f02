from __future__ import annotations

import json
import logging
from pathlib import Path

from ..common.validators import positive_number
from ..core.constants import DEFAULT_MAX_DAILY_HOURS
from .model import SchedulingSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class JsonSettingsRepository(SettingsRepository):
    """Reads ``maxDailyHours`` from the scheduling settings file.

    A missing file, unparsable JSON or a value that is not a positive number
    all fall back to the default cap.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def get(self) -> SchedulingSettings:
        raw = self._read()
        max_daily_hours = positive_number(raw.get("maxDailyHours"))
        if max_daily_hours is None:
            if "maxDailyHours" in raw:
                logger.warning(
                    "Ignoring invalid maxDailyHours=%r in %s, using %s",
                    raw.get("maxDailyHours"), self._path, DEFAULT_MAX_DAILY_HOURS,
                )
            return SchedulingSettings(max_daily_hours=DEFAULT_MAX_DAILY_HOURS)
        return SchedulingSettings(max_daily_hours=max_daily_hours)

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except ValueError:
            logger.warning("Settings file %s could not be parsed, using defaults", self._path)
            return {}
        return data if isinstance(data, dict) else {}
