from __future__ import annotations

from typing import Protocol

from .model import SchedulingSettings


class SettingsRepository(Protocol):
    def get(self) -> SchedulingSettings:
        raise NotImplementedError
