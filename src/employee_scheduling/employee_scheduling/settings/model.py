from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_MAX_DAILY_HOURS


@dataclass(frozen=True)
class SchedulingSettings:
    max_daily_hours: float = DEFAULT_MAX_DAILY_HOURS
