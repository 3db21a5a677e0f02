from __future__ import annotations

from enum import Enum


class StorageBackend(str, Enum):
    """Where employees, shifts and assignments are kept."""

    JSON = "json"
    MYSQL = "mysql"


class AssignmentOutcome(str, Enum):
    """Result tag of an assignment attempt."""

    OK = "OK"
    EMPLOYEE_NOT_FOUND = "EMPLOYEE_NOT_FOUND"
    SHIFT_NOT_FOUND = "SHIFT_NOT_FOUND"
    ALREADY_ASSIGNED = "ALREADY_ASSIGNED"
    INVALID_CONFIG = "INVALID_CONFIG"
    INVALID_SHIFT_TIME = "INVALID_SHIFT_TIME"
    DAILY_LIMIT_EXCEEDED = "DAILY_LIMIT_EXCEEDED"
