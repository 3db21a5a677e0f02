from __future__ import annotations

from typing import Iterable

from ..core.constants import ID_DIGITS


def next_identifier(existing_ids: Iterable[str], *, prefix: str, digits: int = ID_DIGITS) -> str:
    """Next sequential id such as ``E004`` after ``E001..E003``.

    Ids whose suffix is not a number are skipped.
    """

    highest = 0
    for existing in existing_ids:
        suffix = str(existing)[len(prefix):]
        if suffix.isdecimal():
            highest = max(highest, int(suffix))
    return f"{prefix}{highest + 1:0{digits}d}"
