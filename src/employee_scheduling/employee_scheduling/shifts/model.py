from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Shift:
    """Domain entity: a dated work interval.

    ``start_time`` / ``end_time`` stay as the raw ``HH:MM`` text from storage;
    they are validated when durations are computed, not when loaded.
    """

    shift_id: str
    date: str
    start_time: str
    end_time: str
